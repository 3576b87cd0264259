"""Core table types, metadata records, errors and logging"""
