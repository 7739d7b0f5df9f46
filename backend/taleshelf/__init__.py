"""TaleShelf - in-memory story shelf served over HTTP."""
