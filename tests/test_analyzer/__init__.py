"""Statistics tests"""
