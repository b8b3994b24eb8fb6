# DEPENDENCIES
import re
import sys
import json
import time
import requests
from enum import Enum
from typing import Any
from typing import Dict
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from utils.logger import log_error
from config.settings import settings
from utils.logger import RiskEngineLogger
from config.model_config import ModelConfig


class LLMProvider(Enum):
    """
    Supported LLM providers
    """
    OLLAMA = "ollama"


@dataclass
class LLMResponse:
    """
    Standardized LLM response
    """
    text            : str
    provider        : str
    model           : str
    tokens_used     : int
    latency_seconds : float
    success         : bool
    error_message   : Optional[str]            = None
    raw_response    : Optional[Dict[str, Any]] = None


    def to_dict(self) -> Dict[str, Any]:
        return {"text"            : self.text,
                "provider"        : self.provider,
                "model"           : self.model,
                "tokens_used"     : self.tokens_used,
                "latency_seconds" : round(self.latency_seconds, 3),
                "success"         : self.success,
                "error_message"   : self.error_message,
               }


class LLMManager:
    """
    Local LLM access through the Ollama HTTP API, used for plain-language explanations
    """
    def __init__(self, ollama_base_url: Optional[str] = None, ollama_model: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize LLM Manager

        Arguments:
        ----------
            ollama_base_url { str } : Ollama server URL (default: settings.OLLAMA_BASE_URL)

            ollama_model    { str } : Model tag (default: settings.OLLAMA_MODEL)

            timeout         { int } : Request timeout in seconds (default: settings.OLLAMA_TIMEOUT)
        """
        self.config          = ModelConfig()
        self.ollama_base_url = (ollama_base_url or settings.OLLAMA_BASE_URL).rstrip("/")
        self.ollama_model    = ollama_model or settings.OLLAMA_MODEL
        self.ollama_timeout  = timeout or settings.OLLAMA_TIMEOUT

        log_info("LLMManager initialized",
                 base_url = self.ollama_base_url,
                 model    = self.ollama_model,
                )


    @RiskEngineLogger.log_execution_time("llm_complete")
    def complete(self, prompt: str, model: Optional[str] = None, temperature: Optional[float] = None, max_tokens: Optional[int] = None,
                 system_prompt: Optional[str] = None, json_mode: bool = False) -> LLMResponse:
        """
        Complete a prompt with the local model

        Arguments:
        ----------
            prompt        { str }   : User prompt

            model         { str }   : Model tag override

            temperature   { float } : Sampling temperature (default: settings.OLLAMA_TEMPERATURE)

            max_tokens    { int }   : Maximum tokens to generate (default: settings.EXPLANATION_MAX_TOKENS)

            system_prompt { str }   : Optional system prompt

            json_mode     { bool }  : Ask the server for JSON output

        Returns:
        --------
            { LLMResponse }         : success is False when the call failed; nothing is raised
        """
        model       = model or self.ollama_model
        temperature = settings.OLLAMA_TEMPERATURE if temperature is None else temperature
        max_tokens  = max_tokens or settings.EXPLANATION_MAX_TOKENS

        try:
            return self._complete_ollama(prompt        = prompt,
                                         model         = model,
                                         temperature   = temperature,
                                         max_tokens    = max_tokens,
                                         system_prompt = system_prompt,
                                         json_mode     = json_mode,
                                        )

        except (requests.RequestException, ValueError) as e:
            log_error(e, context = {"component" : "LLMManager", "operation" : "complete", "model" : model})

            return LLMResponse(text            = "",
                               provider        = LLMProvider.OLLAMA.value,
                               model           = model,
                               tokens_used     = 0,
                               latency_seconds = 0.0,
                               success         = False,
                               error_message   = str(e),
                              )


    def _complete_ollama(self, prompt: str, model: str, temperature: float, max_tokens: int, system_prompt: Optional[str], json_mode: bool) -> LLMResponse:
        start_time  = time.time()
        full_prompt = prompt

        if system_prompt:
            full_prompt = f"<|system|>\n{system_prompt}\n<|user|>\n{prompt}\n<|assistant|>"

        payload     = {"model"   : model,
                       "prompt"  : full_prompt,
                       "stream"  : False,
                       "options" : {"temperature" : temperature,
                                    "num_predict" : max_tokens,
                                    "top_p"       : self.config.LLM_GENERATION["top_p"],
                                   },
                      }

        if json_mode:
            payload["format"] = "json"

        response       = requests.post(f"{self.ollama_base_url}/api/generate", json = payload, timeout = self.ollama_timeout)
        response.raise_for_status()

        result         = response.json()
        generated_text = result.get("response", "")
        latency        = time.time() - start_time

        # Rough token estimate
        tokens_used    = len(prompt.split()) + len(generated_text.split())

        log_info("Ollama completion successful",
                 model           = model,
                 tokens_used     = tokens_used,
                 latency_seconds = round(latency, 3),
                )

        return LLMResponse(text            = generated_text,
                           provider        = LLMProvider.OLLAMA.value,
                           model           = model,
                           tokens_used     = tokens_used,
                           latency_seconds = latency,
                           success         = True,
                           raw_response    = result,
                          )


    def generate_structured_json(self, prompt: str, schema_description: str, **kwargs) -> Dict[str, Any]:
        """
        Generate a JSON object; raises ValueError when the call fails or the answer holds no JSON object
        """
        system_prompt = (f"You are a helpful assistant that returns valid JSON.\n"
                         f"Expected schema:\n{schema_description}\n\n"
                         f"Return ONLY valid JSON, no markdown, no explanation."
                        )

        response      = self.complete(prompt        = prompt,
                                      system_prompt = system_prompt,
                                      json_mode     = True,
                                      **kwargs,
                                     )

        if not response.success:
            raise ValueError(f"LLM completion failed: {response.error_message}")

        return extract_json_object(response.text)



def strip_think_blocks(text: str) -> str:
    """
    Remove <think>...</think> reasoning blocks some local models emit
    """
    return re.sub(r"<think>[\s\S]*?</think>", "", text).strip()


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Parse the outermost {...} block of a model answer
    """
    cleaned = strip_think_blocks(text).replace("```json", "").replace("```", "")
    match   = re.search(r"\{[\s\S]*\}", cleaned)

    if not match:
        raise ValueError("No JSON object in LLM response")

    try:
        return json.loads(match.group(0))

    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse JSON response: {e}")
