"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services call repositories for DB operations; routers own the transaction
(``await db.commit()``) except where a service documents otherwise.
"""
