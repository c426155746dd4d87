"""EatFast 백오피스 — 매장 직원용 관리 시스템.

EatFast back-office — Store staff management system for the restaurant chain.
"""
