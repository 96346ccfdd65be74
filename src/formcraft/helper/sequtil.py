from typing import Iterable, List, TypeVar

T = TypeVar('T')


def move_item(items: Iterable[T], from_index: int, to_index: int) -> List[T]:
    ''' Remove the element at `from_index` and reinsert it at `to_index`.
        All other elements keep their relative order. Both indices must
        address an existing position, negative indices are not accepted.
    '''
    result = list(items)
    size = len(result)

    for index in (from_index, to_index):
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < size:
            raise IndexError(f"Index [{index}] out of range [0..{size - 1}]")

    result.insert(to_index, result.pop(from_index))
    return result


def unique(values: Iterable[T]) -> bool:
    seen = set()
    for value in values:
        if value in seen:
            return False
        seen.add(value)

    return True
