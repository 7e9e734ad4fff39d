from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from meeting_rpg.presentation.menu_controls import arrow_menu, clear_screen, prompt_number, prompt_text


_CONSOLE = Console()
_BORDER_LOOP = "cyan"
_BORDER_ROSTER = "green"
_BORDER_TASKS = "yellow"
_BORDER_LADDER = "magenta"
_BORDER_RESULT = "bright_cyan"
_BORDER_WARNING = "red"

ACTIONS = (
    "Add Team Member",
    "Remove Team Member",
    "Play Round",
    "Team Task",
    "Attempt Promotion",
    "View Team Stats",
    "View Available Tasks",
    "View Promotion Ladder",
    "View Milestones",
    "Advance Day",
    "Back to Title",
)


def _prompt_continue(message: str = "Press ENTER to continue...") -> None:
    if _CONSOLE is not None:
        _CONSOLE.input(f"[dim]{message}[/dim]")
        clear_screen()
        return
    input(message)
    clear_screen()


def _render_message_panel(title: str, lines: list[str], *, border_style: str = _BORDER_RESULT) -> None:
    rows = [str(line) for line in lines if str(line).strip()]
    if _CONSOLE is not None:
        body = "\n".join(rows) if rows else "No updates."
        _CONSOLE.print(Panel.fit(body, title=f"[bold]{title}[/bold]", border_style=border_style))
        return

    print(f"=== {title} ===")
    for row in rows:
        print(row)


def _render_roster(summaries) -> None:
    if _CONSOLE is not None:
        table = Table(title="Team Members", border_style=_BORDER_ROSTER)
        table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("Level", justify="right")
        table.add_column("Job")
        table.add_column("Activities", justify="right")
        for row in summaries:
            job = f"{row.job_level} *" if row.eligible_for_promotion else row.job_level
            table.add_row(str(row.position), row.name, str(row.level), job, str(row.activities_left))
        _CONSOLE.print(table)
        return

    print("\n=== Team Members ===")
    for row in summaries:
        flag = " [promotion ready]" if row.eligible_for_promotion else ""
        print(
            f"{row.position}. {row.name} (Level {row.level}, {row.job_level}, "
            f"{row.activities_left} activities left){flag}"
        )


def _render_character_sheet(sheet) -> None:
    threshold = sheet.promotion_threshold
    promotion_line = "Top of the ladder" if threshold is None else f"{sheet.experience}/{threshold} XP"
    if sheet.eligible_for_promotion:
        promotion_line += " (eligible)"
    if _CONSOLE is not None:
        grid = Table.grid(padding=(0, 1))
        grid.add_column(style="bold cyan", justify="right")
        grid.add_column(style="white")
        grid.add_row("Level", f"{sheet.level} ({sheet.experience}/{sheet.next_level_xp} XP)")
        grid.add_row("Job", sheet.job_level)
        grid.add_row("Promotion", promotion_line)
        grid.add_row("Activities", f"{sheet.activities_left} left, idle {sheet.days_since_activity} day(s)")
        for skill, value in sheet.skills:
            grid.add_row(skill, str(value))
        _CONSOLE.print(Panel.fit(grid, title=f"[bold]{sheet.name}[/bold]", border_style=_BORDER_ROSTER))
        return

    print(f"\n=== {sheet.name} ===")
    print(f"Level: {sheet.level} | Experience: {sheet.experience}/{sheet.next_level_xp} ({sheet.xp_to_next_level} to next)")
    print(f"Job: {sheet.job_level} | Promotion: {promotion_line}")
    print(f"Activities left: {sheet.activities_left} | Days idle: {sheet.days_since_activity}")
    print("Skills:")
    for skill, value in sheet.skills:
        print(f"  {skill:>15}: {value}")


def _render_tasks(tasks) -> None:
    if _CONSOLE is not None:
        table = Table(title="Available Meeting Tasks", border_style=_BORDER_TASKS)
        table.add_column("#", justify="right")
        table.add_column("Task")
        table.add_column("Requires")
        table.add_column("Difficulty", justify="right")
        table.add_column("Reward")
        for task in tasks:
            table.add_row(
                str(task.position),
                f"{task.name}\n[dim]{task.description}[/dim]",
                task.required_skill,
                str(task.difficulty),
                f"{task.xp_reward} XP, +{task.skill_reward} {task.required_skill}",
            )
        _CONSOLE.print(table)
        return

    print("\n=== Available Meeting Tasks ===")
    for task in tasks:
        print(f"{task.position}. {task.name}")
        print(f"   {task.description}")
        print(f"   Requires: {task.required_skill} (Difficulty: {task.difficulty})")
        print(f"   Reward: {task.xp_reward} XP, +{task.skill_reward} {task.required_skill}\n")


def _render_promotion_ladder(rows) -> None:
    if _CONSOLE is not None:
        table = Table(title="Promotion Ladder", border_style=_BORDER_LADDER)
        table.add_column("From")
        table.add_column("To")
        table.add_column("XP", justify="right")
        table.add_column("Task")
        table.add_column("Requirements")
        table.add_column("Difficulty", justify="right")
        for row in rows:
            requirements = ", ".join(f"{skill} {value}" for skill, value in row.requirements.items())
            table.add_row(
                row.job_level,
                row.next_job_level,
                str(row.experience_threshold),
                row.task_name,
                requirements,
                str(row.difficulty),
            )
        _CONSOLE.print(table)
        return

    print("\n=== Promotion Ladder ===")
    for row in rows:
        requirements = ", ".join(f"{skill} {value}" for skill, value in row.requirements.items())
        print(f"{row.job_level} -> {row.next_job_level} at {row.experience_threshold} XP")
        print(f"   {row.task_name}: {row.description}")
        print(f"   Requires: {requirements} (Difficulty: {row.difficulty})")


def _has_team(game_service) -> bool:
    if game_service.list_character_summaries():
        return True
    _render_message_panel("Team", ["No team members available! Add some first."], border_style=_BORDER_WARNING)
    return False


def _run_add_member(game_service) -> None:
    name = prompt_text("Enter team member name (or 'cancel'): ")
    result = game_service.add_character_intent(name)
    _render_message_panel("Team", result.messages)


def _run_remove_member(game_service) -> None:
    if not _has_team(game_service):
        return
    _render_roster(game_service.list_character_summaries())
    position = prompt_number("Remove which team member? (0 to cancel): ")
    if position is None:
        _render_message_panel("Team", ["Invalid selection!"], border_style=_BORDER_WARNING)
        return
    result = game_service.remove_character_intent(position)
    _render_message_panel("Team", result.messages)


def _choose_task(game_service) -> int | None:
    tasks = game_service.list_meeting_tasks_intent()
    _render_tasks(tasks)
    return prompt_number(f"Select task (1-{len(tasks)}): ")


def _run_single_task(game_service) -> None:
    if not _has_team(game_service):
        return
    summaries = game_service.list_character_summaries()
    _render_roster(summaries)
    position = prompt_number(f"Select team member (1-{len(summaries)}): ")
    task_position = _choose_task(game_service)
    if position is None or task_position is None:
        _render_message_panel("Round", ["Invalid selection!"], border_style=_BORDER_WARNING)
        return
    result = game_service.attempt_task_intent(position, task_position)
    _render_message_panel("Round", result.messages)


def _run_team_task(game_service) -> None:
    if not _has_team(game_service):
        return
    _render_roster(game_service.list_character_summaries())
    selection = prompt_text("Select team members (e.g. 1, 2 4): ")
    task_position = _choose_task(game_service)
    if task_position is None:
        _render_message_panel("Team Task", ["Invalid selection!"], border_style=_BORDER_WARNING)
        return
    result = game_service.attempt_team_task_intent(selection, task_position)
    _render_message_panel("Team Task", result.messages)


def _run_promotion(game_service) -> None:
    if not _has_team(game_service):
        return
    _render_roster(game_service.list_character_summaries())
    position = prompt_number("Who attempts a promotion? ")
    if position is None:
        _render_message_panel("Promotion", ["Invalid selection!"], border_style=_BORDER_WARNING)
        return
    result = game_service.attempt_promotion_intent(position)
    _render_message_panel("Promotion", result.messages, border_style=_BORDER_LADDER)


def _run_team_stats(game_service) -> None:
    if not _has_team(game_service):
        return
    for sheet in game_service.list_character_sheets_intent():
        _render_character_sheet(sheet)


def _run_milestones(game_service) -> None:
    lines = game_service.list_milestones_intent()
    _render_message_panel("Milestones", lines or ["Nothing noteworthy yet."])


def _run_advance_day(game_service) -> None:
    result = game_service.advance_day_intent()
    _render_message_panel("New Day", result.messages)


def run_game_loop(game_service) -> None:
    handlers = (
        _run_add_member,
        _run_remove_member,
        _run_single_task,
        _run_team_task,
        _run_promotion,
        _run_team_stats,
        lambda service: _render_tasks(service.list_meeting_tasks_intent()),
        lambda service: _render_promotion_ladder(service.list_promotion_ladder_intent()),
        _run_milestones,
        _run_advance_day,
    )
    while True:
        day = game_service.get_day_view_intent()
        choice = arrow_menu(
            f"Meeting Masters - Day {day.current_day}",
            list(ACTIONS),
            footer_hint=f"{day.roster_size} team member(s) on the roster.",
        )
        if choice == -1 or choice >= len(handlers):
            return
        handlers[choice](game_service)
        _prompt_continue()
