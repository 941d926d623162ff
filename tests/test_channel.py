from patternbook.channel import Channel, Subscriber


def make():
    channel = Channel("CoderArmy")
    return channel, Subscriber("Varun", channel), Subscriber("Tarun", channel)


def test_video_data_format():
    channel = Channel("CoderArmy")
    channel.latest_video = "Observer Pattern Tutorial"
    assert channel.video_data() == "\nCheckout our new Video : Observer Pattern Tutorial\n"


def test_upload_notifies_all():
    channel, varun, tarun = make()
    channel.subscribe(varun)
    channel.subscribe(tarun)
    messages = channel.upload_video("Observer Pattern Tutorial")
    assert messages == [
        "Hey Varun,\nCheckout our new Video : Observer Pattern Tutorial\n",
        "Hey Tarun,\nCheckout our new Video : Observer Pattern Tutorial\n",
    ]


def test_unsubscribe_stops_notifications():
    channel, varun, tarun = make()
    channel.subscribe(varun)
    channel.subscribe(tarun)
    channel.unsubscribe(varun)
    messages = channel.upload_video("Decorator Pattern Tutorial")
    assert len(messages) == 1
    assert messages[0].startswith("Hey Tarun,")


def test_subscribe_ignores_duplicates():
    channel, varun, _ = make()
    channel.subscribe(varun)
    channel.subscribe(varun)
    assert channel.subscribers == [varun]


def test_unsubscribe_absent_is_harmless():
    channel, varun, tarun = make()
    channel.subscribe(tarun)
    channel.unsubscribe(varun)
    assert channel.subscribers == [tarun]


def test_upload_prints_header(capsys):
    channel, varun, _ = make()
    channel.subscribe(varun)
    channel.upload_video("Observer Pattern Tutorial")
    out = capsys.readouterr().out
    assert '[CoderArmy uploaded "Observer Pattern Tutorial"]' in out
    assert "Hey Varun," in out