"""데이터 전달 객체"""
