"""Command channel adapter between element proxies and the browser-control process.

A channel turns ``(name, page_id, element_id, *args)`` into one remote call and
hands back the raw deserialised result. Remote failures surface as
``CommandFailure`` carrying the raw failure name and payload; the channel never
retries and never decides what a failure means for the caller.

``CDPCommandChannel`` talks to an in-page agent through the Chrome DevTools
Protocol. The agent is a script installed in each page under a global name
(``window.__browsernode`` by default) exposing ``invoke(name, elementId, args)``
and answering either ``{"response": value}`` or
``{"error": {"name": ..., "args": [...]}}``.
"""

import json
import logging
from typing import Any, Protocol, runtime_checkable

from cdp_use import CDPClient
from cdp_use.cdp.target import SessionID

from browsernode.channel.exceptions import CommandFailure
from browsernode.channel.views import CommandName, CommandRequest, ElementId, PageId
from browsernode.config import CONFIG

logger = logging.getLogger(__name__)

JAVASCRIPT_ERROR_NAME = 'BrowserNode.JavascriptError'


@runtime_checkable
class CommandChannel(Protocol):
    """Anything able to run a named command against a page/element pair."""

    async def invoke(
        self,
        name: CommandName | str,
        page_id: PageId,
        element_id: ElementId | None,
        *args: Any,
    ) -> Any: ...


class CDPCommandChannel:
    """Command channel backed by a cdp_use ``CDPClient``.

    Page ids are mapped to CDP session ids with ``attach_page``. A page id that
    was never attached is used as the session id itself, which suits drivers
    that hand out CDP session ids as page ids.

    Example:
        >>> channel = CDPCommandChannel(cdp_client)
        >>> channel.attach_page(1, session_id)
        >>> await channel.invoke('tag_name', 1, 42)
        'input'
    """

    def __init__(
        self,
        cdp_client: CDPClient,
        sessions: dict[PageId, SessionID] | None = None,
        agent_name: str | None = None,
    ):
        self._cdp_client = cdp_client
        self._sessions: dict[PageId, SessionID] = dict(sessions or {})
        self._agent_name = agent_name or CONFIG.PAGE_AGENT

    @property
    def agent_name(self) -> str:
        return self._agent_name

    def attach_page(self, page_id: PageId, session_id: SessionID) -> None:
        """Route commands for ``page_id`` through the given CDP session."""
        self._sessions[page_id] = session_id
        logger.debug(f'Attached page {page_id} to CDP session {session_id}')

    def detach_page(self, page_id: PageId) -> None:
        self._sessions.pop(page_id, None)

    def session_for(self, page_id: PageId) -> SessionID:
        return self._sessions.get(page_id, str(page_id))

    def build_expression(self, request: CommandRequest) -> str:
        """Render the JavaScript expression that runs ``request`` inside the page agent."""
        return 'window[{agent}].invoke({name}, {element_id}, {args})'.format(
            agent=json.dumps(self._agent_name),
            name=json.dumps(request.name.value),
            element_id=json.dumps(request.element_id),
            args=json.dumps(list(request.args), default=str),
        )

    async def invoke(
        self,
        name: CommandName | str,
        page_id: PageId,
        element_id: ElementId | None,
        *args: Any,
    ) -> Any:
        request = CommandRequest(name=name, page_id=page_id, element_id=element_id, args=args)
        session_id = self.session_for(page_id)

        result = await self._cdp_client.send.Runtime.evaluate(
            params={
                'expression': self.build_expression(request),
                'returnByValue': True,
                'awaitPromise': True,
            },
            session_id=session_id,
        )

        if 'exceptionDetails' in result:
            logger.debug(f'Page agent threw while running {request}')
            raise CommandFailure(JAVASCRIPT_ERROR_NAME, result['exceptionDetails'], request=request)

        envelope = result.get('result', {}).get('value')
        if isinstance(envelope, dict) and 'error' in envelope:
            error = envelope['error'] or {}
            raise CommandFailure(error.get('name', ''), error, request=request)

        if isinstance(envelope, dict):
            return envelope.get('response')
        return None
