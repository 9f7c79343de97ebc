"""Test suite (package so helpers can be shared via relative imports, e.g. `.fakes`)."""
