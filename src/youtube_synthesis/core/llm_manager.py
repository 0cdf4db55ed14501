"""Shared chat model management."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from ..utils.logging import get_logger
from .config import LLMConfig as LLMSettings
from .config import config

logger = get_logger("llm_manager")

JSON_OBJECT_FORMAT = {"type": "json_object"}


@dataclass
class LLMConfig:
    """Settings for one chat model instance."""
    model: str = config.llm.default_model
    temperature: Optional[float] = config.llm.default_temperature
    timeout: int = config.llm.default_timeout
    api_key: Optional[str] = config.llm.api_key

    @classmethod
    def from_settings(cls, settings: LLMSettings) -> "LLMConfig":
        return cls(
            model=settings.default_model,
            temperature=settings.default_temperature,
            timeout=settings.default_timeout,
            api_key=settings.api_key
        )


class LLMManager:
    """Creates the chat model once and sends system/user message pairs to it."""

    def __init__(self, llm_config: Optional[LLMConfig] = None, llm: Any = None):
        self.config = llm_config or LLMConfig.from_settings(config.llm)
        self._llm = llm

    def get_llm(self) -> Any:
        """Get the LangChain chat model, creating it on first use."""
        if self._llm is None:
            logger.info(f"Creating LangChain LLM: {self.config.model} (temp: {self.config.temperature})")
            kwargs: Dict[str, Any] = {
                "model": self.config.model,
                "timeout": self.config.timeout,
            }
            if self.config.temperature is not None:
                kwargs["temperature"] = self.config.temperature
            if self.config.api_key:
                kwargs["api_key"] = self.config.api_key
            self._llm = ChatOpenAI(**kwargs)
        return self._llm

    async def complete(self, system_prompt: str, user_content: str, json_mode: bool = False) -> str:
        """
        Send one system instruction and one user message.

        Args:
            system_prompt: Instruction for the model
            user_content: The single user message
            json_mode: Request the provider's JSON object output mode

        Returns:
            Raw message content
        """
        llm = self.get_llm()
        if json_mode:
            llm = llm.bind(response_format=JSON_OBJECT_FORMAT)

        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_content)
        ]
        response = await llm.ainvoke(messages)
        content = response.content
        logger.debug(f"Model returned {len(content)} characters")
        return content
