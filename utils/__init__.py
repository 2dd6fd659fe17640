"""
utils - Логирование и иерархия исключений.
"""
