"""
Customer Service.

Persistence layer and HTTP surface for customer records stored in MongoDB.
"""

__version__ = "1.0.0"
