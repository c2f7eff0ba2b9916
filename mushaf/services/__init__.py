"""Service layer for mushaf: the data provider and its cache."""
