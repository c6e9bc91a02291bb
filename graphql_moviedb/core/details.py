"""
Resolution a la demande des champs de detail.

Les reponses de liste, recherche ou discover ne contiennent pas les champs
de detail (credits, images, videos, reviews, genres...). Quand un de ces
champs est demande sur un objet partiel, il est recupere par un unique appel
REST puis stocke sur l'objet lui-meme : un second acces au meme champ ne
declenche plus aucun appel. La portee de ce cache est exactement un graphe
d'objets resolu, jamais partage entre requetes.
"""

from typing import Any, Awaitable, Callable, Mapping, MutableMapping, Optional

Fetcher = Callable[[Mapping[str, Any]], Awaitable[Optional[Mapping[str, Any]]]]


async def get_field(
    entity: MutableMapping[str, Any],
    field: str,
    fetcher: Fetcher,
) -> Any:
    """
    Retourne un champ de l'entite, en le recuperant si necessaire.

    Si entity[field] est present (non vide), il est retourne sans appel
    reseau. Sinon fetcher(entity) est appele une fois et le champ est extrait
    de sa reponse normalisee, puis memorise sur l'entite.

    Les erreurs du fetcher (reseau, HTTP) sont propagees sans retry.

    Args:
        entity: Objet partiel (modifie en place)
        field: Nom GraphQL du champ demande
        fetcher: Coroutine effectuant l'appel REST qui fournit le champ

    Returns:
        La valeur du champ, ou None si la reponse ne le contient pas
    """
    value = entity.get(field)
    if value:
        return value

    response = await fetcher(entity)
    value = response.get(field) if response else None
    entity[field] = value
    return value
