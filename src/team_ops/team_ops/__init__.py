"""Team Operations core package.

This package is organized by feature modules (employees, tasks, moms, quests,
attendance, ...) with in-memory repositories, thin form-layer services and
read-only report/reference helpers wired together by ``container``.
"""
