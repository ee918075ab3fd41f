"""
Bearer JWT authentication and token issuance for FastAPI services.
"""
__version__ = "1.0.0"
