"""Core of the customer-facing service booking app"""
