from .frames import country_breakdown_frame, scenario_comparison_frame, team_result_frame

__all__ = ["country_breakdown_frame", "scenario_comparison_frame", "team_result_frame"]
