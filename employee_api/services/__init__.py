"""서비스 패키지 — 라우터와 레포지토리 사이의 위임 계층.

Service package — Layer between the routers and the repositories.
Services receive their repository through the constructor and convert
ORM rows into response schemas.
"""
