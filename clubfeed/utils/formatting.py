"""Text rendering of club activities."""

from clubfeed.models.strava import Activity


def format_activity(activity: Activity) -> str:
    """Render an activity as a single summary line.

    Args:
        activity: Activity decoded from the club feed

    Returns:
        Line such as "Activity: Morning Run, Type: Run, Athlete: Jane D."
    """
    return (
        f"Activity: {activity.name}, Type: {activity.type}, "
        f"Athlete: {activity.athlete.firstname} {activity.athlete.lastname}"
    )
