"""Core building blocks shared by every neo-access feature."""
