"""
Configuration loaded from the environment and the project .env file.
"""
