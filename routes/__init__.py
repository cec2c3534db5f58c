"""
Routes Module

Contains FastAPI routers for the HTTP API.
"""
