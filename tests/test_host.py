from starline.host import FrameScheduler, ViewportConfig


def test_canvas_size_leaves_margins():
    assert ViewportConfig(800, 600).canvas_size == (799, 596)


def test_scheduler_runs_requested_callbacks_in_order():
    seen = []
    scheduler = FrameScheduler()
    scheduler.request(lambda t: seen.append(("a", t)))
    scheduler.request(lambda t: seen.append(("b", t)))
    assert scheduler.dispatch(5) == 2
    assert seen == [("a", 5), ("b", 5)]
    assert scheduler.dispatch(6) == 0


def test_requests_made_during_dispatch_wait_a_frame():
    seen = []
    scheduler = FrameScheduler()

    def tick(t):
        seen.append(t)
        scheduler.request(tick)

    scheduler.request(tick)
    scheduler.dispatch(1)
    assert seen == [1]
    assert scheduler.pending == 1
    scheduler.dispatch(2)
    assert seen == [1, 2]
