"""Event log, message broker and environment tests"""
