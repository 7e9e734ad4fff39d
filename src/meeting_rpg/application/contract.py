CONTRACT_VERSION = "1.0.0"

COMMAND_INTENTS = (
    "add_character_intent",
    "remove_character_intent",
    "attempt_task_intent",
    "attempt_team_task_intent",
    "attempt_promotion_intent",
    "advance_day_intent",
)

QUERY_INTENTS = (
    "list_character_summaries",
    "get_character_sheet_intent",
    "list_character_sheets_intent",
    "list_meeting_tasks_intent",
    "list_promotion_ladder_intent",
    "list_milestones_intent",
    "get_day_view_intent",
)

CONTRACT_DTO_TYPES = (
    "ActionResult",
    "CharacterSummaryView",
    "CharacterSheetView",
    "MeetingTaskView",
    "PromotionLadderRowView",
    "DayView",
)
