"""Repository 레이어"""
