"""Demo data seeding for the Collabia matching app.

Provides idempotent seed data creation for:
- 10 student profiles sharing one password, with discovery fields refreshed on every run
- One current book, skill and game per profile (written once)
- 8 legacy posts and 18 interest posts, each new interest post liked by 1-4 other users
- 6 comments attached to interest posts by content snippet

Usage:
    # From Python:
    from src.collabia_seed.seed import seed_all
    await seed_all(session_factory)

    # From shell:
    python -m src.collabia_seed.seed
"""
