"""HTML 화면 라우터 패키지 — 직원 로그인/로그아웃/비밀번호 재설정 화면.

HTML view package — Server-rendered employee sign-in pages.
"""
