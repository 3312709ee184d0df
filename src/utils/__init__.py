"""Logging and configuration"""
