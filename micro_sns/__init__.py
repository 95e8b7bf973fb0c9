"""Micro SNS - minimal social network REST backend."""
