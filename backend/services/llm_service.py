from typing import List

from injector import inject
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI
from structlog.stdlib import BoundLogger

from core.settings import settings
from domain.entities import ChatTurn, ContentRequest
from domain.errors import ConfigurationError
from domain.interfaces import ILLMService


def build_chat_messages(history: List[ChatTurn], message: str, system_instruction: str) -> List[BaseMessage]:
    """Turn the client-side chat log into langchain messages, oldest first, new message last."""
    messages: List[BaseMessage] = [SystemMessage(content=system_instruction)]
    for turn in history:
        if turn.role == "user":
            messages.append(HumanMessage(content=turn.text))
        else:
            messages.append(AIMessage(content=turn.text))
    messages.append(HumanMessage(content=message))
    return messages


class OpenAILLMService(ILLMService):
    @inject
    def __init__(self, logger: BoundLogger):
        if not settings.openai_api_key:
            logger.error("OpenAI API key missing")
            raise ConfigurationError("OPENAI_API_KEY is missing. Please set it in the environment.")
        self.model = settings.llm_model
        self.llm = ChatOpenAI(
            api_key=settings.openai_api_key,
            model_name=self.model,
            max_retries=settings.llm_max_retries,
            timeout=settings.llm_timeout,
        )
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", "{system_instruction}"),
                ("human", "{instruction}\n\nRespond with JSON only.\n{format_instructions}"),
            ]
        )
        self.logger = logger

    async def generate(self, request: ContentRequest) -> str:
        self.logger.info("Requesting content from LLM", kind=request.kind.value, model=self.model, count=request.count)
        chain = self.prompt | self.llm | StrOutputParser()
        text = await chain.ainvoke(
            {
                "system_instruction": request.system_instruction,
                "instruction": request.instruction,
                "format_instructions": request.format_instructions,
            }
        )
        self.logger.info("LLM content received", kind=request.kind.value, response_length=len(text))
        return text

    async def chat(self, history: List[ChatTurn], message: str, system_instruction: str) -> str:
        messages = build_chat_messages(history, message, system_instruction)
        self.logger.info("Sending chat turn to LLM", model=self.model, history_turns=len(history))
        chain = self.llm | StrOutputParser()
        return await chain.ainvoke(messages)
