"""Price oracle backed by an OpenAI-compatible chat-completions endpoint."""

import logging

import requests

from pricing.domain import DemandSnapshot, OracleScore
from pricing.domain.errors import OracleUnavailableError
from pricing.oracles.decision_log import DecisionLog, OracleDecision
from pricing.oracles.interfaces import PriceOracle
from pricing.oracles.prompt import SYSTEM_PROMPT, build_prompt, parse_score

logger = logging.getLogger(__name__)

SYSTEM_NAME = "pricing-engine"
MAX_RETRIES = 1


class LlmPriceOracle(PriceOracle):
    """Asks a hosted language model for a price and parses its JSON reply.

    Every failure mode (connection error, timeout, non-2xx status, malformed
    body, out-of-contract values) is raised as OracleUnavailableError.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str,
        timeout: float = 15.0,
        temperature: float = 0.5,
        max_tokens: int = 500,
        retries: int = 0,
        session: requests.Session | None = None,
        decision_log: DecisionLog | None = None,
    ) -> None:
        self._api_key = api_key
        self._url = base_url.rstrip("/") + "/chat/completions"
        self._model = model
        self._timeout = timeout
        self._temperature = temperature
        self._max_tokens = max_tokens
        # the model is not idempotent; never retry more than once
        self._retries = max(0, min(retries, MAX_RETRIES))
        # caller-supplied sessions stay open; otherwise one session per request
        self._session = session
        self._decision_log = decision_log or DecisionLog()

    @property
    def decision_log(self) -> DecisionLog:
        return self._decision_log

    def score(self, snapshot: DemandSnapshot) -> OracleScore:
        prompt = build_prompt(snapshot)
        context = {
            "event_id": str(snapshot.event_id),
            "current_price": str(snapshot.current_price),
            "occupancy_rate": round(snapshot.occupancy_rate, 1),
        }

        last_error: OracleUnavailableError | None = None
        for attempt in range(self._retries + 1):
            try:
                content = self._complete(prompt)
            except OracleUnavailableError as exc:
                last_error = exc
                logger.warning(
                    "Oracle request failed (attempt %d/%d): %s",
                    attempt + 1,
                    self._retries + 1,
                    exc.reason,
                )
                continue

            try:
                result = parse_score(content)
            except ValueError as exc:
                self._record(prompt, content, context, failed=True)
                raise OracleUnavailableError(f"Unparseable oracle reply: {exc}") from exc

            self._record(prompt, content, context)
            return result

        self._record(prompt, f"ERROR: {last_error.reason}", context, failed=True)
        raise last_error

    def _complete(self, prompt: str) -> str:
        body = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }
        try:
            if self._session is not None:
                payload = self._post(self._session, body)
            else:
                with requests.Session() as session:
                    payload = self._post(session, body)
        except requests.RequestException as exc:
            raise OracleUnavailableError(f"{type(exc).__name__}: {exc}") from exc
        except ValueError as exc:
            raise OracleUnavailableError("Oracle response is not JSON") from exc

        try:
            return payload["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as exc:
            raise OracleUnavailableError("Oracle response has no message content") from exc

    def _post(self, session: requests.Session, body: dict) -> dict:
        response = session.post(
            self._url,
            json=body,
            headers={"Authorization": f"Bearer {self._api_key}"},
            timeout=self._timeout,
        )
        response.raise_for_status()
        return response.json()

    def _record(self, prompt: str, response: str, context: dict, failed: bool = False) -> None:
        self._decision_log.record(
            OracleDecision(
                system=SYSTEM_NAME,
                model=self._model,
                prompt=prompt,
                response=response,
                context=context,
                failed=failed,
            )
        )
