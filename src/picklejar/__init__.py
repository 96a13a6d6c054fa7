"""PickleJar - step definition catalog for Cucumber and SpecFlow projects."""

__version__ = "0.1.0"
