"""Unit tests against the in-memory store; no database required."""
