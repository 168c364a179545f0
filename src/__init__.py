"""
Kalos Sales Dashboard API

A FastAPI-based service that records sales transactions in memory,
serves revenue analytics, and pushes new transactions to connected
dashboard clients over a WebSocket channel.
"""

__version__ = "0.1.0"
