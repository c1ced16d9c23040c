"""Example: drive the stores and services directly, no UI involved.

Run from the repository root: ``APP_ENV=testing python -m examples.example_usage``.
"""

from datetime import date

from src.team_ops.team_ops.main import create_container


def main():
    container = create_container()

    if not container.auth_service.login("john@company.com", "password"):
        print("login failed")
        return
    user = container.auth_service.require_login()

    unsubscribe = container.tasks_repo.subscribe(lambda event: print(f"[{event.entity}] {event.kind.value} {event.record_id}"))

    quest_id = container.quest_service.create_quest(
        title="Release 1.0", assigned_pic_id="2", created_by=user.manager_id
    )
    task_id = container.quest_service.add_task(
        quest_id,
        title="Write release notes",
        due_date=date.today(),
        created_by=user.manager_id,
        assigned_employee_ids=["1", "missing-employee"],
    )
    unsubscribe()

    task = container.task_service.get(task_id)
    print("Assignees:", container.resolver.employee_names(task.assigned_employee_ids))
    print("Quest tasks:", container.resolver.task_count_for_quest(quest_id))
    print("Due today:", [t.title for t in container.report_service.due_today()])


if __name__ == "__main__":
    main()
