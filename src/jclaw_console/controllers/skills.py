"""Read-only view of the registered tools."""
from jclaw_console.controllers.base import ListController
from jclaw_console.domain.models import Skill
from jclaw_console.gateway.client import GatewayClient
from jclaw_console.ui.page import ConsolePage
from jclaw_console.ui.views import render_skill_cards


class SkillsController(ListController[list[Skill]]):
    name = "skills"
    subject = "skills"
    empty_message = "No tools registered."

    def __init__(self, gateway: GatewayClient, page: ConsolePage):
        super().__init__(page.skills_grid)
        self.gateway = gateway

    async def fetch(self) -> list[Skill]:
        return await self.gateway.list_skills()

    def render(self, skills: list[Skill]) -> str:
        return render_skill_cards(skills)
