"""Call system and request token tests"""
