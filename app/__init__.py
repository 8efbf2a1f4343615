"""
Pomotimer API service
"""
