"""Configuration and on-device storage shared by every labbook module."""
