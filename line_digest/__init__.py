"""LINE 일일 대화 정리 봇"""
