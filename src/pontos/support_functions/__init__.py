"""Date, time window and HTTP session helpers"""
