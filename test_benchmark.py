from benchmark import SEARCH_CONFIG, build_parser, run_single_task


def test_parser_defaults_come_from_search_config():
    args = build_parser().parse_args([])
    assert args.max_time == SEARCH_CONFIG["max_time"]
    assert args.idle == SEARCH_CONFIG["idle_restart_threshold"]
    assert args.tenure == SEARCH_CONFIG["tenure_multiplier"]


def test_run_single_task_records_first_solution():
    row = run_single_task(7, 12345, SEARCH_CONFIG)
    assert row["ell"] == 7
    assert row["found"]
    assert row["time"] is not None
    assert row["best_F"] == 0
