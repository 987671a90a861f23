from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict

from ...utils.ids import normalize_property_id
from .sitelinks import Sitelink, normalize_site
from .statements import Statement
from .terms import Term, normalize_language


def _filter_terms(terms: list[Term], langs: Optional[Iterable[Any]]) -> list[Term]:
    if not langs:
        return list(terms)
    wanted = {normalize_language(lang) for lang in langs}
    return [term for term in terms if term.lang in wanted]


def _find_term(terms: list[Term], lang: Any) -> Optional[Term]:
    lang = normalize_language(lang)
    return next((term for term in terms if term.lang == lang), None)


class Item(BaseModel):
    """A decoded Wikibase item.

    Every accessor is a pure filter over the decoded data. Language codes
    and site codes may be given as strings or enum members; passing no
    filter (or an empty one) returns everything.
    """

    id: str
    labels: list[Term] = []
    descriptions: list[Term] = []
    aliases: list[Term] = []
    statements: list[Statement] = []
    sitelinks: list[Sitelink] = []

    model_config = ConfigDict(frozen=True)

    def get_label(self, lang: Any) -> Optional[Term]:
        return _find_term(self.labels, lang)

    def get_labels(self, langs: Optional[Iterable[Any]] = None) -> list[Term]:
        return _filter_terms(self.labels, langs)

    def get_description(self, lang: Any) -> Optional[Term]:
        return _find_term(self.descriptions, lang)

    def get_descriptions(self, langs: Optional[Iterable[Any]] = None) -> list[Term]:
        return _filter_terms(self.descriptions, langs)

    def get_aliases(self, langs: Optional[Iterable[Any]] = None) -> list[Term]:
        # Several aliases per language are normal.
        return _filter_terms(self.aliases, langs)

    def get_sitelink(self, site: Any) -> Optional[Sitelink]:
        site = normalize_site(site)
        return next((s for s in self.sitelinks if s.site == site), None)

    def get_sitelinks(self, sites: Optional[Iterable[Any]] = None) -> list[Sitelink]:
        if not sites:
            return list(self.sitelinks)
        wanted = {normalize_site(site) for site in sites}
        return [s for s in self.sitelinks if s.site in wanted]

    def get_statements(
        self, properties: Optional[Iterable[Union[int, str]]] = None
    ) -> list[Statement]:
        if not properties:
            return list(self.statements)
        wanted = {normalize_property_id(p) for p in properties}
        return [s for s in self.statements if s.property_id in wanted]
