"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Repositories hold the named entity and native SQL queries; they never
commit, leaving transaction boundaries to the router.
"""
