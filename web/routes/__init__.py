"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- messages: 채팅 메시지 → Command 처리
- ledger: 거래 목록/잔액/CSV 조회
"""
