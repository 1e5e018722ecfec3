"""Player persona derived from how completed quests spread across quadrants."""

from typing import Iterable, NamedTuple

from .tasks import Quadrant, TaskItem


class Persona(NamedTuple):
    """Localization keys for a persona's title and flavor line."""

    title_key: str
    vibe_key: str


def _persona(name: str) -> Persona:
    return Persona(f"TITLE_{name}", f"VIBE_{name}")


DEFAULT_PERSONA = _persona("ELITE_VANGUARD")

# (top quadrant, runner-up) -> persona
PERSONA_TABLE: dict[tuple[Quadrant, Quadrant], Persona] = {
    (Quadrant.DO_NOW, Quadrant.PLAN): _persona("ELITE_VANGUARD"),
    (Quadrant.DO_NOW, Quadrant.DELEGATE): _persona("CHAOS_SURFER"),
    (Quadrant.DO_NOW, Quadrant.LATER): _persona("DEADLINE_DAREDEVIL"),
    (Quadrant.PLAN, Quadrant.DO_NOW): _persona("GRANDMASTER"),
    (Quadrant.PLAN, Quadrant.DELEGATE): _persona("BENEVOLENT_RULER"),
    (Quadrant.PLAN, Quadrant.LATER): _persona("PHILOSOPHER_KING"),
    (Quadrant.DELEGATE, Quadrant.DO_NOW): _persona("SPINNING_TOP"),
    (Quadrant.DELEGATE, Quadrant.PLAN): _persona("SIDE_QUEST_HERO"),
    (Quadrant.DELEGATE, Quadrant.LATER): _persona("NPC_ENERGY"),
    (Quadrant.LATER, Quadrant.DO_NOW): _persona("CLUTCH_GAMER"),
    (Quadrant.LATER, Quadrant.PLAN): _persona("DAYDREAM_BELIEVER"),
    (Quadrant.LATER, Quadrant.DELEGATE): _persona("POTATO_MODE"),
}


def rank_quadrants(tasks: Iterable[TaskItem]) -> list[Quadrant]:
    """
    Quadrants ordered by number of completed tasks, most first.

    Ties fall back to DO NOW > PLAN > DELEGATE > LATER. Open tasks are ignored.
    """
    counts = {q: 0 for q in Quadrant}
    for task in tasks:
        if task.is_completed:
            counts[task.quadrant] += 1

    priority = list(Quadrant)
    return sorted(Quadrant, key=lambda q: (-counts[q], priority.index(q)))


def personality(tasks: Iterable[TaskItem]) -> Persona:
    """
    Persona for a task collection.

    No completed tasks -> DEFAULT_PERSONA. Otherwise the top two ranked
    quadrants select an entry from PERSONA_TABLE.

    Pure function - no I/O.
    """
    completed = [t for t in tasks if t.is_completed]
    if not completed:
        return DEFAULT_PERSONA

    first, second = rank_quadrants(completed)[:2]
    return PERSONA_TABLE[(first, second)]
