from typing import Dict, List, Sequence
from ..schemas import Recipe

def intersect_two(left: Sequence[Recipe], right: Sequence[Recipe]) -> List[Recipe]:
    """Conserva los elementos de ``left`` cuyo id aparece en ``right``, en el orden de ``left``."""
    right_ids = {r.id for r in right}
    return [r for r in left if r.id in right_ids]

def intersect_all(lists: Sequence[Sequence[Recipe]], index: int = 0) -> List[Recipe]:
    """
    Intersección recursiva de derecha a izquierda:
    primero se resuelve ``lists[index+1:]`` y luego se filtra ``lists[index]`` contra ese acumulado.
    El orden final es el de la primera lista. No elimina duplicados.
    """
    if len(lists) == 0:
        return []
    if len(lists) == 1:
        return lists[0]
    if index == len(lists) - 1:
        return lists[index]
    rest = intersect_all(lists, index + 1)
    return intersect_two(lists[index], rest)

def dedupe(recipes: Sequence[Recipe]) -> List[Recipe]:
    """Colapsa ids repetidos; gana la primera aparición y se preserva el orden."""
    unique: Dict[str, Recipe] = {}
    for r in recipes:
        unique.setdefault(r.id, r)
    return list(unique.values())
