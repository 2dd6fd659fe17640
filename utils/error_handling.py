"""
utils/error_handling.py

Иерархия исключений проекта.

Отсутствие решения исключением не является: решатели возвращают None.
"""


class SolverError(Exception):
    """Базовое исключение проекта."""
    pass


class MalformedBoardError(SolverError):
    """
    Ошибка невалидной доски.

    Сетка не прямоугольная, рамка не из недоступных клеток,
    цель вне доски или неизвестный символ во входном файле.
    """
    pass


class IllegalMoveError(SolverError):
    """Ход недопустим в текущей позиции (только при apply(validate=True))."""
    pass


class OutputFolderError(SolverError):
    """Папка для сохранения изображений не существует."""
    pass
