"""
Core: закрытая таблица backing-типов, целочисленная арифметика и модель значения.

Не зависит от внешних систем; все операции чистые и детерминированные.
"""
