"""Task tracker backend and client"""
