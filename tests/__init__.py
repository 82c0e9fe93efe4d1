"""Test suite for the CRJ Interaction Fixer."""
