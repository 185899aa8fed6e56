from .scanner import OddsScanner, scanner, start_scanner, stop_scanner
from .odds import get_bookmaker_odds, find_best_odds
from .analyzer import analyze_match, analyze_matches, summarize
from .manual import calculate_manual, parse_odds_entries
from .instructions import (
    format_opportunity,
    format_instruction,
    format_result_json,
    format_opportunity_json,
    format_summary_json,
    format_scan_json,
    format_manual_json,
    format_opportunities_table,
    generate_disclaimer,
)

__all__ = [
    "OddsScanner",
    "scanner",
    "start_scanner",
    "stop_scanner",
    "get_bookmaker_odds",
    "find_best_odds",
    "analyze_match",
    "analyze_matches",
    "summarize",
    "calculate_manual",
    "parse_odds_entries",
    "format_opportunity",
    "format_instruction",
    "format_result_json",
    "format_opportunity_json",
    "format_summary_json",
    "format_scan_json",
    "format_manual_json",
    "format_opportunities_table",
    "generate_disclaimer",
]
