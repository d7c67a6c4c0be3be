"""
애플리케이션 설정 패키지
"""
