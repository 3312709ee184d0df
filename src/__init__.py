"""PONTOS vessel data exporter"""
