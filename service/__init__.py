"""EcoHero 서비스 레이어"""
