from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .common.datetime_utils import parse_iso_date
from .container import Container, build_container
from .database.bootstrap import seed_demo_data

logger = logging.getLogger(__name__)


def create_container(settings_module: Optional[str] = None) -> Container:
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("settings=%s", settings_module)

    container = build_container(
        manager_password=getattr(settings, "MANAGER_PASSWORD", None),
        manager_password_hash=getattr(settings, "MANAGER_PASSWORD_HASH", None),
    )

    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        seed_demo_data(
            container,
            attendance_start=parse_iso_date(settings.MOCK_ATTENDANCE_START),
            attendance_end=parse_iso_date(settings.MOCK_ATTENDANCE_END),
            random_seed=getattr(settings, "MOCK_RANDOM_SEED", None),
        )

    return container


def main() -> None:
    container = create_container()
    summary = container.report_service.dashboard_summary()

    print(f"Employees: {summary.employee_count}")
    print(f"Open tasks: {summary.open_tasks} ({summary.weekly_growth.growth:+.0f}% this week)")
    print(f"Completion rate: {summary.completion_rate:.0f}%")
    print(f"Quests: {summary.quest_count} ({summary.quests_this_week} this week)")
    print(f"Meetings: {summary.mom_count}")
    print(f"Monthly hours: {summary.monthly_attendance.total_hours:.0f}h")
    for alert in summary.alerts:
        print(f"! {alert}")

    for quest in container.quest_service.list_all():
        pic = container.resolver.manager_name(quest.assigned_pic_id)
        count = container.resolver.task_count_for_quest(quest.id)
        print(f"- {quest.title} [{quest.status.value}] PIC: {pic}, {count} tasks")


if __name__ == "__main__":
    main()
