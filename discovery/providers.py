# /discovery/providers.py

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Union

import httpx
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from pathway.config import settings
from pathway.errors import DiscoveryStrategyError, ValidationTimeoutError
from pathway.logger import get_logger

logger = get_logger(__name__)

SearchResponse = Union[str, List[Dict[str, Any]]]


class ResourceSearchProvider(ABC):
    """A free-text search capability that answers a prompt with learning resources."""
    @abstractmethod
    async def search(self, prompt: str) -> SearchResponse:
        pass


class GeminiResourceSearchProvider(ResourceSearchProvider):
    """Asks a Gemini model for resources. The raw text answer is parsed downstream."""

    SYSTEM_PROMPT = (
        "You are a helpful assistant that finds current, active online learning resources. "
        "Always provide working URLs and accurate information. Format responses as valid JSON when requested."
    )

    def __init__(self, model: Optional[str] = None, api_key: Optional[str] = None):
        self.model = model or settings.GENERATION_MODEL
        self.api_key = settings.GOOGLE_API_KEY if api_key is None else api_key
        self._chain = None

    def _get_chain(self):
        if self._chain is None:
            llm = ChatGoogleGenerativeAI(model=self.model, temperature=0.1, google_api_key=self.api_key)
            prompt = ChatPromptTemplate.from_messages([
                ("system", self.SYSTEM_PROMPT),
                ("human", "{request}"),
            ])
            self._chain = prompt | llm | StrOutputParser()
        return self._chain

    async def search(self, prompt: str) -> SearchResponse:
        if not self.api_key:
            raise DiscoveryStrategyError("GOOGLE_API_KEY is not configured; intelligent search is unavailable.")
        try:
            return await self._get_chain().ainvoke({"request": prompt})
        except Exception as e:
            raise DiscoveryStrategyError(f"Gemini search failed: {e}") from e


class UrlReachabilityChecker(ABC):
    """Decides whether a URL currently answers with a non-error status."""
    @abstractmethod
    async def check(self, url: str, timeout: float) -> bool:
        """
        Returns True when reachable, False otherwise.

        Raises:
            ValidationTimeoutError: no answer within `timeout` seconds.
        """
        pass

    async def check_many(self, urls: Sequence[str], timeout: float) -> List[Union[bool, BaseException]]:
        tasks = [self._bounded_check(url, timeout) for url in urls]
        return await asyncio.gather(*tasks, return_exceptions=True)

    async def _bounded_check(self, url: str, timeout: float) -> bool:
        try:
            return await asyncio.wait_for(self.check(url, timeout), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise ValidationTimeoutError(url, timeout) from e


class HttpxReachabilityChecker(UrlReachabilityChecker):
    HEADERS = {
        'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
                      '(KHTML, like Gecko) Chrome/124.0 Safari/537.36'
    }

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self.HEADERS, follow_redirects=True, timeout=timeout, transport=self.transport,
        )

    async def check(self, url: str, timeout: float, client: Optional[httpx.AsyncClient] = None) -> bool:
        if client is None:
            async with self._client(timeout) as own_client:
                return await self._probe(own_client, url, timeout)
        return await self._probe(client, url, timeout)

    async def check_many(self, urls: Sequence[str], timeout: float) -> List[Union[bool, BaseException]]:
        # One short-lived client per batch.
        async with self._client(timeout) as client:
            tasks = [self.check(url, timeout, client=client) for url in urls]
            return await asyncio.gather(*tasks, return_exceptions=True)

    async def _probe(self, client: httpx.AsyncClient, url: str, timeout: float) -> bool:
        try:
            response = await client.head(url)
            # Some sites refuse HEAD outright.
            if response.status_code == 405:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            raise ValidationTimeoutError(url, timeout) from e
        except httpx.HTTPError as e:
            logger.info(f"URL check failed for {url}: {e}")
            return False
        return response.status_code < 400
