"""Core logic of dragreorder: the reorder engine and Qt import hub."""
