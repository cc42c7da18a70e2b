# portal/scoring.py
from __future__ import annotations

import logging

from django.db import models

logger = logging.getLogger(__name__)


class ActivityType(models.TextChoices):
    NARRATIVA = "narrativa", "Narrativa"
    MICROCUENTO = "microcuento", "Microcuento"
    DRABBLE = "drabble", "Drabble"
    HILO = "hilo", "Hilo"
    ROL = "rol", "Rol"
    ENCUESTA = "encuesta", "Encuesta"
    COLLAGE = "collage", "Collage"
    POEMAS = "poemas", "Poemas"
    PINTURAS = "pinturas", "Pinturas"
    INTERPRETACION = "interpretacion", "Interpretación"
    OTRO = "otro", "Otro"


# Types whose score does not depend on words or responses.
FLAT_TRAZOS = {
    ActivityType.MICROCUENTO: 100,
    ActivityType.ENCUESTA: 100,
    ActivityType.COLLAGE: 150,
    ActivityType.POEMAS: 150,
    ActivityType.PINTURAS: 200,
    ActivityType.INTERPRETACION: 200,
    ActivityType.OTRO: 100,
}

# Inclusive word ranges for narrativa; anything outside scores NARRATIVA_FALLBACK.
NARRATIVA_TIERS = (
    (300, 499, 300),
    (500, 999, 400),
    (1000, 1499, 500),
    (1500, 1999, 600),
)
NARRATIVA_FALLBACK = 300

# (exclusive upper bound on responses, trazos); past the last bound the ceiling applies.
HILO_TIERS = ((5, 100),)
HILO_CEILING = 150
ROL_TIERS = ((5, 250), (10, 400), (15, 550))
ROL_CEILING = 700

DRABBLE_SHORT_LIMIT = 150
DRABBLE_SHORT_TRAZOS = 150
DRABBLE_TRAZOS = 200

TRAZOS_VALUES = frozenset(
    [NARRATIVA_FALLBACK, HILO_CEILING, ROL_CEILING, DRABBLE_SHORT_TRAZOS, DRABBLE_TRAZOS]
    + [t for _, _, t in NARRATIVA_TIERS]
    + [t for _, t in HILO_TIERS + ROL_TIERS]
    + list(FLAT_TRAZOS.values())
)


def resolve_activity_type(value: str | ActivityType) -> ActivityType:
    """
    Map a category string onto the closed ActivityType set.

    Unrecognized categories resolve to OTRO instead of being rejected, so they
    are scored at the lowest flat tier. The coercion is logged to keep typos
    visible.
    """
    if isinstance(value, ActivityType):
        return value
    try:
        return ActivityType(value)
    except ValueError:
        logger.warning("Unknown activity type %r scored as %s", value, ActivityType.OTRO.value)
        return ActivityType.OTRO


def _responses_tier(responses: int, tiers, ceiling: int) -> int:
    for bound, trazos in tiers:
        if responses < bound:
            return trazos
    return ceiling


def _narrativa(words: int) -> int:
    for low, high, trazos in NARRATIVA_TIERS:
        if low <= words <= high:
            return trazos
    return NARRATIVA_FALLBACK


def compute_trazos(activity_type: str | ActivityType, words: int, responses: int | None = 0) -> int:
    """
    Score one activity in trazos.

    Pure and deterministic. `words` and `responses` must already be validated
    non-negative integers; a missing `responses` counts as 0.
    """
    kind = resolve_activity_type(activity_type)
    responses = responses or 0

    if kind == ActivityType.NARRATIVA:
        return _narrativa(words)
    if kind == ActivityType.DRABBLE:
        return DRABBLE_SHORT_TRAZOS if words < DRABBLE_SHORT_LIMIT else DRABBLE_TRAZOS
    if kind == ActivityType.HILO:
        return _responses_tier(responses, HILO_TIERS, HILO_CEILING)
    if kind == ActivityType.ROL:
        return _responses_tier(responses, ROL_TIERS, ROL_CEILING)
    # Remaining members of ActivityType, OTRO included, are flat.
    return FLAT_TRAZOS[kind]
