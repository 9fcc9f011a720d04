"""Recommendation engine stages: catalog, classification, treatments, conflicts."""
