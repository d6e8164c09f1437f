"""
Relay layer: HTTP 서버 (FastAPI).

역할:
- POST /api/chat: 메시지 히스토리 → turn 조립 → 업스트림 호출 → 응답 텍스트
- 무상태 (세션/저장소 없음)
"""
