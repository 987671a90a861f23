import json
import logging
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .transport import HttpResponse, RequestsTransport
from ..config.settings import Settings, settings as default_settings
from ..models.errors import ApiError, DisallowedBotEditError, DisallowedIpEditError
from ..models.internal_representation.item import Item
from ..models.internal_representation.ranks import Rank
from ..models.internal_representation.references import Reference
from ..models.internal_representation.snaks import Snak
from ..models.internal_representation.statements import Statement
from ..models.internal_representation.tagged_value import TaggedValue
from ..models.internal_representation.terms import Term
from ..models.internal_representation.values import VALUE_TYPES, Value
from ..parsers import parse_aliases, parse_item, parse_statement, parse_terms
from ..serializers import serialize_statement
from ..utils.ids import normalize_item_id, normalize_property_id, validate_statement_id

logger = logging.getLogger(__name__)

REST_PATH = "/w/rest.php/wikibase/v0"


class Client(BaseModel):
    """Client for the Wikibase REST API.

    Reads decode straight into the models in
    ``wikibase_rest.models.internal_representation``. Edits validate their
    arguments and the anonymous-edit policy before anything is sent.

    Args:
        wikibase_url: Root of the Wikibase instance, e.g. ``https://www.wikidata.org``.
        user_agent: Sent with every request; Wikimedia requires a descriptive one.
        bot: Flag edits as bot edits.
        allow_ip_edits: Allow unauthenticated edits, which are attributed to your IP address.
        transport: Anything implementing ``HttpTransport``; defaults to requests.
    """

    wikibase_url: str
    user_agent: str
    bot: bool = True
    allow_ip_edits: bool = False
    request_timeout: float = 30.0
    log_http_requests: bool = False
    transport: Any = Field(default=None, exclude=True)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.transport is None:
            self.transport = RequestsTransport(timeout=self.request_timeout)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "Client":
        settings = settings or default_settings
        options = {
            "wikibase_url": settings.wikibase_url,
            "user_agent": settings.user_agent,
            "bot": settings.bot,
            "allow_ip_edits": settings.allow_ip_edits,
            "request_timeout": settings.request_timeout,
            "log_http_requests": settings.log_http_requests,
        }
        options.update(kwargs)
        return cls(**options)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @field_validator("wikibase_url")
    @classmethod
    def validate_wikibase_url(cls, v: str) -> str:
        if v.endswith("/"):
            raise ValueError(f'Wikibase URL must not end with a `/`, got "{v}".')
        return v

    @property
    def authenticated(self) -> bool:
        # Authentication is not supported yet.
        return False

    @property
    def api_url(self) -> str:
        return f"{self.wikibase_url}{REST_PATH}"

    def get_item(self, item_id: Union[int, str]) -> Item:
        item_id = normalize_item_id(item_id)
        return parse_item(self._get(f"/entities/items/{item_id}"))

    def get_labels(self, item_id: Union[int, str]) -> list[Term]:
        item_id = normalize_item_id(item_id)
        return parse_terms(self._get(f"/entities/items/{item_id}/labels"))

    def get_descriptions(self, item_id: Union[int, str]) -> list[Term]:
        item_id = normalize_item_id(item_id)
        return parse_terms(self._get(f"/entities/items/{item_id}/descriptions"))

    def get_aliases(self, item_id: Union[int, str]) -> list[Term]:
        item_id = normalize_item_id(item_id)
        return parse_aliases(self._get(f"/entities/items/{item_id}/aliases"))

    def get_statement(self, statement_id: str) -> Statement:
        statement_id = validate_statement_id(statement_id)
        return parse_statement(self._get(f"/statements/{statement_id}"))

    def add_statement(
        self,
        item_id: Union[int, str],
        property_id: Union[int, str],
        value: Value,
        qualifiers: Optional[Iterable[Snak]] = None,
        references: Optional[Iterable[Reference]] = None,
        rank: Union[Rank, str] = Rank.NORMAL,
        tags: Optional[list[str]] = None,
        comment: Optional[str] = None,
    ) -> bool:
        """Add a statement to an item.

        ``value`` is one of the value models, e.g.
        ``StringValue(value="foo")`` or ``NoValue()``. Returns whether the API
        accepted the edit.
        """
        item_id = normalize_item_id(item_id)
        property_id = normalize_property_id(property_id)
        rank = Rank.normalize(rank)
        if not isinstance(value, VALUE_TYPES):
            raise ValueError(
                f"Expected an instance of one of the Wikibase value types for value, but got {value!r}."
            )

        statement = serialize_statement(
            property_id,
            TaggedValue.of(value),
            qualifiers=qualifiers or [],
            references=references or [],
            rank=rank,
        )
        return self._edit(
            "POST",
            f"/entities/items/{item_id}/statements",
            {"statement": statement},
            tags=tags,
            comment=comment,
        )

    def delete_statement(
        self,
        statement_id: str,
        tags: Optional[list[str]] = None,
        comment: Optional[str] = None,
    ) -> bool:
        statement_id = validate_statement_id(statement_id)
        return self._edit("DELETE", f"/statements/{statement_id}", {}, tags=tags, comment=comment)

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
        }

    def _check_edit_allowed(self) -> None:
        if self.authenticated:
            return
        if not self.allow_ip_edits:
            raise DisallowedIpEditError()
        if self.bot:
            raise DisallowedBotEditError()

    def _get(self, path: str) -> Any:
        url = f"{self.api_url}{path}"
        logger.debug(f"  → GET {url}")
        response = self.transport.get(url, self._headers())
        self._log_response(response)
        if not response.ok:
            raise _api_error(response)
        return json.loads(response.body)

    def _edit(
        self,
        method: str,
        path: str,
        body: dict[str, Any],
        tags: Optional[list[str]] = None,
        comment: Optional[str] = None,
    ) -> bool:
        self._check_edit_allowed()

        body = dict(body)
        body["bot"] = self.bot
        if tags:
            body["tags"] = list(tags)
        if comment is not None:
            body["comment"] = comment
        data = json.dumps(body).encode("utf-8")

        url = f"{self.api_url}{path}"
        logger.debug(f"  → {method} {url}")
        if self.log_http_requests:
            logger.debug(f"    Body: {data[:200].decode('utf-8', 'replace')}...")

        if method == "POST":
            response = self.transport.post(url, self._headers(), data)
        elif method == "DELETE":
            response = self.transport.delete(url, self._headers(), data)
        else:
            raise ValueError(f"Unsupported edit method: {method}")

        self._log_response(response)
        if not response.ok:
            logger.error(f"{method} {url} failed: {_api_error(response)}")
            return False
        return True

    def _log_response(self, response: HttpResponse) -> None:
        if self.log_http_requests:
            status_emoji = "✓" if response.ok else "✗"
            logger.debug(f"  ← {status_emoji} {response.status}")
            if response.body:
                logger.debug(f"    Body: {response.body[:200].decode('utf-8', 'replace')}...")


def _api_error(response: HttpResponse) -> ApiError:
    try:
        error_json = json.loads(response.body)
    except ValueError:
        error_json = None
    if isinstance(error_json, dict):
        return ApiError(
            status=response.status,
            code=error_json.get("code"),
            info=error_json.get("message", ""),
        )
    return ApiError(
        status=response.status,
        code=None,
        info=response.body.decode("utf-8", "replace"),
    )
