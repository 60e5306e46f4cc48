"""
OptaHire resume profile API.
"""
