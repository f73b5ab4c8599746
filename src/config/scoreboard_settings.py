"""
Centralized Scoreboard Settings

Simple toggles for logging and store bookkeeping.
Change these settings to tune output for demos and testing.
"""


class ScoreboardSettings:
    """
    Scoreboard runtime controls.

    Values are read at call time, so tests may patch them on the class.
    """

    # ================================================================
    # LOGGING
    # ================================================================

    LOG_LEVEL = "INFO"
    # DEBUG: log every add/update/complete
    # INFO:  startup and summaries only

    LOG_DIR = "logs"

    ENABLE_CONSOLE_LOGGING = True

    ENABLE_FILE_LOGGING = False
    # True:  also write rotating log files under LOG_DIR
    # False: console only

    # ================================================================
    # STORES
    # ================================================================

    TRACK_TRANSACTIONS = True
    # True:  record every add in the store's transaction log
    # False: skip the log (metadata is still updated)

    # ================================================================
    # DEMO
    # ================================================================

    # (home, away, home_score, away_score), in kickoff order
    DEMO_MATCHES = [
        ("Mexico", "Canada", 0, 5),
        ("Spain", "Brazil", 10, 2),
        ("Germany", "France", 2, 2),
        ("Uruguay", "Italy", 6, 6),
        ("Argentina", "Australia", 3, 1),
    ]
