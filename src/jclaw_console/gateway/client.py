"""
Authenticated request gateway for the admin API.

Every network call of the console goes through `GatewayClient.request`, which:
- sends the session cookies and JSON Accept/Content-Type headers,
- attaches the anti-forgery header on mutating methods,
- turns 401/403 into a redirect to SSO plus AuthenticationRequired,
- turns every other failure into RequestFailed with a display message.
"""
from typing import Any
from urllib.parse import quote, unquote

import httpx

from jclaw_console.config.settings import Settings, get_settings
from jclaw_console.domain.exceptions import (
    AuthenticationRequired,
    MalformedResponse,
    RequestFailed,
)
from jclaw_console.domain.models import (
    Agent,
    AuditPage,
    ChatReply,
    ChatRequest,
    IdentityMapping,
    Session,
    Skill,
    UserInfo,
    parse_model,
    parse_models,
)
from jclaw_console.gateway.navigation import BrowserNavigator
from jclaw_console.interfaces import INavigator
from jclaw_console.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

SAFE_METHODS = frozenset({"GET", "HEAD"})
AUTH_FAILURE_STATUSES = frozenset({401, 403})


class GatewayClient:
    """
    Client for the administrative API.

    Example:
        >>> async with GatewayClient(cookies={"SESSION": "..."}) as gateway:
        ...     agents = await gateway.list_agents()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        navigator: INavigator | None = None,
        client: httpx.AsyncClient | None = None,
        cookies: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            settings: Console settings (defaults to get_settings())
            navigator: Target of the SSO redirect on 401/403
            client: Pre-built httpx client; the gateway will not close it
            cookies: Initial cookie jar (session cookie, XSRF-TOKEN)
            transport: Custom httpx transport for the owned client
        """
        self._settings = settings or get_settings()
        self._navigator = navigator or BrowserNavigator()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self._settings.base_url,
            cookies=cookies,
            timeout=self._settings.request_timeout,
            verify=self._settings.verify_tls,
            transport=transport,
        )

    async def __aenter__(self) -> "GatewayClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @property
    def navigator(self) -> INavigator:
        return self._navigator

    def xsrf_token(self) -> str | None:
        """
        Anti-forgery token from the XSRF cookie, URL-decoded, or None.

        The server re-issues the cookie for the API host, so the jar may hold
        it next to the copy the gateway was seeded with. The host cookie wins;
        among equals the most recently stored one does.
        """
        name = self._settings.xsrf_cookie_name
        host = self._client.base_url.host
        matches = [c for c in self._client.cookies.jar if c.name == name]
        for_host = [c for c in matches if c.domain.lstrip(".") in (host, f"{host}.local")]
        candidates = for_host or matches
        raw = candidates[-1].value if candidates else None
        return unquote(raw) if raw else None

    def api_path(self, *segments: Any) -> str:
        """Build an admin API path, percent-encoding every segment."""
        encoded = "/".join(quote(str(s), safe="") for s in segments)
        return f"{self._settings.api_prefix}/{encoded}"

    async def request(self, path: str, **options: Any) -> Any:
        """
        Perform a request and return the parsed JSON body, or None.

        Caller options (`method`, `headers`, `json`, `params`, `content`)
        override the defaults key by key; the header map is merged one
        level deep so unspecified default headers are kept.

        Raises:
            AuthenticationRequired: On 401/403, after redirecting to SSO
            RequestFailed: On any other non-2xx status or transport failure
            MalformedResponse: On a JSON response that cannot be decoded
        """
        method = str(options.get("method") or "GET").upper()

        defaults: dict[str, Any] = {
            "headers": {
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        }
        if method not in SAFE_METHODS:
            token = self.xsrf_token()
            if token:
                defaults["headers"][self._settings.xsrf_header_name] = token

        merged = {
            **defaults,
            **options,
            "headers": {**defaults["headers"], **(options.get("headers") or {})},
        }
        merged["method"] = method

        logger.debug("admin api request", method=method, path=path, headers=merged["headers"])

        try:
            response = await self._client.request(url=path, **merged)
        except httpx.HTTPError as e:
            logger.warning("admin api unreachable", method=method, path=path, error=str(e))
            raise RequestFailed(str(e) or e.__class__.__name__) from e

        if response.status_code in AUTH_FAILURE_STATUSES:
            target = self._settings.sso_login_url
            logger.warning(
                "authentication required, redirecting to SSO",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            self._navigator.navigate(target)
            raise AuthenticationRequired(status_code=response.status_code, redirect_to=target)

        if not response.is_success:
            text = response.text
            logger.warning(
                "admin api request failed",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise RequestFailed(text or f"HTTP {response.status_code}", status_code=response.status_code)

        if not _is_json_response(response):
            return None

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponse(
                "Server returned invalid JSON",
                status_code=response.status_code,
            ) from e

    # ----- Agents -----

    async def list_agents(self) -> list[Agent]:
        return parse_models(Agent, await self.request(self.api_path("agents")))

    async def get_agent(self, agent_id: str) -> Agent | None:
        payload = await self.request(self.api_path("agents", agent_id))
        return parse_model(Agent, payload) if payload is not None else None

    async def upsert_agent(self, agent: Agent) -> Agent | None:
        """Create or replace an agent; the path key is the body's agentId."""
        payload = await self.request(
            self.api_path("agents", agent.agent_id),
            method="PUT",
            json=agent.to_payload(),
        )
        return parse_model(Agent, payload) if payload is not None else None

    async def delete_agent(self, agent_id: str) -> None:
        await self.request(self.api_path("agents", agent_id), method="DELETE")

    # ----- Identity mappings -----

    async def list_pending_mappings(self) -> list[IdentityMapping]:
        return parse_models(
            IdentityMapping,
            await self.request(self.api_path("identity-mappings", "pending")),
        )

    async def approve_mapping(self, mapping_id: str, jclaw_principal: str) -> IdentityMapping | None:
        payload = await self.request(
            self.api_path("identity-mappings", mapping_id, "approve"),
            method="POST",
            json={"jclawPrincipal": jclaw_principal},
        )
        return parse_model(IdentityMapping, payload) if payload is not None else None

    # ----- Sessions -----

    async def list_sessions(self, agent_id: str | None = None) -> list[Session]:
        params = {"agentId": agent_id} if agent_id else None
        return parse_models(Session, await self.request(self.api_path("sessions"), params=params))

    async def archive_session(self, session_id: str) -> None:
        await self.request(self.api_path("sessions", session_id, "archive"), method="POST")

    # ----- Audit log -----

    async def audit_page(
        self,
        page: int,
        size: int | None = None,
        principal: str | None = None,
        event_type: str | None = None,
    ) -> AuditPage:
        params: dict[str, Any] = {"page": page, "size": size or self._settings.audit_page_size}
        if principal:
            params["principal"] = principal
        if event_type:
            params["eventType"] = event_type

        payload = await self.request(self.api_path("audit"), params=params)
        return parse_model(AuditPage, payload) if payload is not None else AuditPage()

    # ----- Read-only lookups -----

    async def userinfo(self) -> UserInfo | None:
        payload = await self.request(self.api_path("userinfo"))
        return parse_model(UserInfo, payload) if payload is not None else None

    async def list_skills(self) -> list[Skill]:
        return parse_models(Skill, await self.request(self.api_path("skills")))

    async def list_models(self) -> list[str]:
        payload = await self.request(self.api_path("models"))
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise MalformedResponse("Unexpected model list payload")
        return [str(m) for m in payload]

    # ----- Chat -----

    async def send_chat(self, chat_request: ChatRequest) -> ChatReply:
        payload = await self.request(
            self.api_path("chat", "send"),
            method="POST",
            json=chat_request.to_payload(),
        )
        return parse_model(ChatReply, payload) if payload is not None else ChatReply()


def _is_json_response(response: httpx.Response) -> bool:
    """Check if response is JSON."""
    content_type = response.headers.get("content-type", "")
    return "application/json" in content_type.lower()
