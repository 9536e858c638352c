"""
Linear Search — поиск всех вхождений значения в последовательности
"""

from typing import Any, Iterable, List


def find_all(items: Iterable[Any], value: Any) -> List[int]:
    """
    Индексы всех элементов, равных value, по возрастанию.

    Сравнение поэлементное (==): для строк ищутся отдельные символы,
    а не подстроки.

    Args:
        items: Любая упорядоченная коллекция (list, tuple, range, str, ...)
        value: Искомое значение

    Returns:
        Список индексов (пустой, если совпадений нет)

    Examples:
        >>> find_all([0, 1, 2, 1, 0], 1)
        [1, 3]
        >>> find_all(range(5), 1)
        [1]
        >>> find_all([], 1)
        []
    """
    results: List[int] = []
    for pos, item in enumerate(items):
        if item == value:
            results.append(pos)
    return results
