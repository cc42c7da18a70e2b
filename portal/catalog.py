"""Fixed community vocabularies: aristas and their albums, rank labels and medals."""
from __future__ import annotations

from typing import Dict, List, Optional

from django.db import models


class Arista(models.TextChoices):
    INVENTARIO_DE_LA_VIDA = "inventario_de_la_vida", "Inventario de la vida"
    MAPA_DEL_INCONSCIENTE = "mapa_del_inconsciente", "Mapa del inconsciente"
    ECOS_DEL_CORAZON = "ecos_del_corazon", "Ecos del corazón"
    REFLEJOS_EN_EL_TIEMPO = "reflejos_en_el_tiempo", "Reflejos en el tiempo"
    GALERIA_DEL_ALMA = "galeria_del_alma", "Galería del alma"


class Rank(models.TextChoices):
    ALMA_EN_TRANSITO = "alma_en_transito", "Alma en tránsito"
    VOZ_EN_BOCETO = "voz_en_boceto", "Voz en boceto"
    NARRADOR_DE_ATMOSFERAS = "narrador_de_atmosferas", "Narrador de atmósferas"
    ESCRITOR_DE_INTROSPECCIONES = "escritor_de_introspecciones", "Escritor de introspecciones"
    ARQUITECTO_DEL_ALMA = "arquitecto_del_alma", "Arquitecto del alma"


class Role(models.TextChoices):
    USER = "user", "Usuario"
    ADMIN = "admin", "Administrador"


ALBUM_OPTIONS: Dict[str, List[str]] = {
    Arista.INVENTARIO_DE_LA_VIDA: [
        "Inventario de Sentidos",
        "Compras y Dilemas",
        "Cartas desde la rutina",
        "Chequeos y descuidos",
    ],
    Arista.MAPA_DEL_INCONSCIENTE: [
        "Conversaciones en el tiempo",
        "Diario de los sueños",
        "Habitaciones sin salidas",
    ],
    Arista.ECOS_DEL_CORAZON: [
        "Cicatrices invisibles",
        "Melodías en el aire",
        "Ternuras y traiciones",
    ],
    Arista.REFLEJOS_EN_EL_TIEMPO: [
        "Susurros de otras vidas",
        "Ecos del alma",
        "Conexión espiritual",
    ],
    Arista.GALERIA_DEL_ALMA: [
        "Vestigios de la Moda",
        "Obras del Ser",
        "El reflejo de las palabras",
    ],
}

RANK_MEDALS: Dict[str, Optional[str]] = {
    Rank.ALMA_EN_TRANSITO: None,
    Rank.VOZ_EN_BOCETO: "Susurros que germinan",
    Rank.NARRADOR_DE_ATMOSFERAS: "Excelente narrador",
    Rank.ESCRITOR_DE_INTROSPECCIONES: "Lector de huellas",
    Rank.ARQUITECTO_DEL_ALMA: "Arquitecto de personajes",
}


def albums_for(arista: str) -> List[str]:
    """Album names of an arista; unknown aristas have none."""
    return list(ALBUM_OPTIONS.get(arista, []))


def medal_for(rank: str) -> Optional[str]:
    return RANK_MEDALS.get(rank)
