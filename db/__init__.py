"""데이터베이스 연결"""
