"""User registration and login service issuing signed bearer tokens."""

__version__ = "1.0.0"
