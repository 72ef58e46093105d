# tests/conftest.py
import asyncio
import os
import sys
from dataclasses import dataclass

import pytest

# Ensure repository root is on PYTHONPATH for tests
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

# Ensure placeholder secrets do not trigger validators during tests
os.environ.setdefault("OPENAI_API_KEY", "test-key")


@dataclass
class StubResponse:
    content: str


class StubGenerator:
    """Stands in for the LLM service; records every call."""

    def __init__(
        self,
        content: str = "• Placeholder enhancement",
        fail_engines: set[str] | None = None,
        hang_engines: set[str] | None = None,
        fail_first: int = 0,
        delay: float = 0.0,
    ) -> None:
        self.content = content
        self.fail_engines = fail_engines or set()
        self.hang_engines = hang_engines or set()
        self.fail_first = fail_first
        self.delay = delay
        self.calls: list[dict] = []
        self.cancelled: list[str] = []
        self.in_flight = 0
        self.peak_in_flight = 0
        self.closed = False

    def calls_for(self, engine_name: str) -> list[dict]:
        return [c for c in self.calls if c["engine_name"] == engine_name]

    async def generate(
        self,
        prompt,
        *,
        system_prompt=None,
        temperature=None,
        max_tokens=None,
        mode=None,
        engine_name=None,
    ):
        self.calls.append(
            {
                "prompt": prompt,
                "system_prompt": system_prompt,
                "temperature": temperature,
                "max_tokens": max_tokens,
                "mode": mode,
                "engine_name": engine_name,
            }
        )
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            if engine_name in self.hang_engines:
                await asyncio.Event().wait()
            if self.delay:
                await asyncio.sleep(self.delay)
            if engine_name in self.fail_engines:
                raise RuntimeError("provider unavailable")
            if len(self.calls) <= self.fail_first:
                raise RuntimeError("transient failure")
            return StubResponse(self.content)
        except asyncio.CancelledError:
            self.cancelled.append(engine_name)
            raise
        finally:
            self.in_flight -= 1

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def make_generator():
    return StubGenerator


@pytest.fixture
def episode():
    return {
        "title": "The Quiet Floor",
        "episodeNumber": 3,
        "synopsis": "Alex stays late and finds the server room unlocked.",
        "scenes": [
            {"title": "Cold Open", "content": "Alex alone under flickering lights."},
            {"title": "The Server Room", "content": "A door that should be locked."},
        ],
    }


@pytest.fixture
def story_bible():
    return {
        "seriesTitle": "Night Shift",
        "genre": "horror",
        "tone": "dark",
        "theme": "isolation",
        "mainCharacters": [
            {
                "name": "Alex",
                "archetype": "Reluctant Investigator",
                "description": "A systems engineer who trusts machines more than people.",
                "arc": "From avoidance to confrontation",
                "relationships": ["Marcus: wary colleague", "Sam: only friend"],
                "motivation": "Find out what happened to Sarah",
                "internalConflict": "Curiosity against self-preservation",
                "voice": "Clipped, technical, dry",
            },
            {"name": "Marcus", "premiseRole": "Antagonist", "background": "Middle manager."},
        ],
        "worldBuilding": {
            "setting": "TechCorp headquarters after hours",
            "culturalContext": "Startup burnout culture",
            "locations": [
                {
                    "name": "Server Room",
                    "description": "Humming racks",
                    "atmosphere": "claustrophobic",
                },
                {"name": "Lobby", "description": "Glass atrium", "atmosphere": "sterile"},
            ],
        },
        "narrativeElements": {
            "callbacks": "Sarah's badge from episode 1",
            "foreshadowing": "The elevator stops on 13",
            "recurringMotifs": ["flickering lights", "reflections"],
        },
    }
