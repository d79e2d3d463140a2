"""Tests for the Textual chat widget."""
import asyncio

from textual.widgets import Button, Input, Static, TextArea

from hookchat.conversation import FAILURE_NOTICE, Sender
from hookchat.ui import (
    ChatHistoryWidget,
    ChatInputBar,
    ConfigPanel,
    DebugPanel,
    ErrorBanner,
    HookchatApp,
    LogLevel,
    TypingIndicator,
)
from hookchat.webhook import TransportError

from conftest import StubWebhookClient

SIZE = (100, 40)


async def _type_and_send(app, pilot, text):
    app.query_one("#chat-input", TextArea).text = text
    await pilot.pause()
    app.query_one("#send-btn", Button).press()
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestStartup:
    """Tests for the initial screen."""

    async def test_unconfigured_start(self):
        """Test that without a URL the config panel and notice are shown."""
        app = HookchatApp(client=StubWebhookClient())
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            assert app.title == "Calendar Assistant"
            assert app.sub_title == "Not configured"
            assert app.query_one("#config-panel", ConfigPanel).display
            assert app.query_one("#input-notice", Static).display
            assert not app.query_one("#chat-input-bar", ChatInputBar).display
            assert not app.query_one("#input-hint", Static).display

    async def test_welcome_message_is_rendered(self):
        """Test that the assistant greeting is the first message."""
        app = HookchatApp(client=StubWebhookClient())
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            history = app.query_one("#chat-history", ChatHistoryWidget)
            assert history.rendered_count == 1
            assert len(app.query(".assistant-message")) == 1

    async def test_configured_start(self, webhook_url):
        """Test that a URL from the command line enables the input."""
        app = HookchatApp(client=StubWebhookClient(), endpoint_url=webhook_url)
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            assert app.sub_title == "Connected"
            assert app.query_one("#chat-input-bar", ChatInputBar).display
            assert not app.query_one("#input-notice", Static).display
            assert app.query_one("#webhook-url", Input).value == webhook_url

    async def test_hidden_panels_at_start(self):
        """Test that the banner, typing indicator and log panel start hidden."""
        app = HookchatApp(client=StubWebhookClient())
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            assert not app.query_one("#error-banner", ErrorBanner).display
            assert not app.query_one("#typing-indicator", TypingIndicator).display
            assert not app.query_one("#debug-panel", DebugPanel).display

    async def test_log_level_shows_log_panel(self):
        """Test that a log level opens the log panel with that threshold."""
        app = HookchatApp(client=StubWebhookClient(), log_level="warning")
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            log_panel = app.query_one("#debug-panel", DebugPanel)
            assert log_panel.display
            assert log_panel.log_level == LogLevel.WARNING


class TestConfiguration:
    """Tests for the config panel."""

    async def test_entering_url_and_saving(self, webhook_url):
        """Test that saving a URL hides the panel and enables the input."""
        app = HookchatApp(client=StubWebhookClient())
        async with app.run_test(size=SIZE) as pilot:
            app.query_one("#webhook-url", Input).value = webhook_url
            await pilot.pause()
            assert app.store.state.endpoint_url == webhook_url
            assert app.sub_title == "Connected"

            app.query_one("#save-btn", Button).press()
            await pilot.pause()

            assert not app.query_one("#config-panel", ConfigPanel).display
            assert app.query_one("#chat-input-bar", ChatInputBar).display

    async def test_saving_blank_url_keeps_panel(self):
        """Test that Save with an empty URL leaves the panel open."""
        app = HookchatApp(client=StubWebhookClient())
        async with app.run_test(size=SIZE) as pilot:
            app.query_one("#webhook-url", Input).value = "   "
            await pilot.pause()
            app.query_one("#save-btn", Button).press()
            await pilot.pause()

            assert app.query_one("#config-panel", ConfigPanel).display
            assert app.sub_title == "Not configured"

    async def test_toggle_config(self, webhook_url):
        """Test that the config panel can be hidden and reopened."""
        app = HookchatApp(client=StubWebhookClient(), endpoint_url=webhook_url)
        async with app.run_test(size=SIZE) as pilot:
            panel = app.query_one("#config-panel", ConfigPanel)
            assert panel.display

            await app.run_action("toggle_config")
            await pilot.pause()
            assert not panel.display

            await app.run_action("toggle_config")
            await pilot.pause()
            assert panel.display


class TestSending:
    """Tests for sending messages from the widget."""

    async def test_send_shows_user_message_and_reply(self, webhook_url):
        """Test one successful turn through the input bar."""
        client = StubWebhookClient(replies=["Meeting booked"])
        app = HookchatApp(client=client, endpoint_url=webhook_url)
        async with app.run_test(size=SIZE) as pilot:
            await _type_and_send(app, pilot, "Book a meeting at 3pm")

            assert client.calls[0][1] == "Book a meeting at 3pm"
            assert [m.text for m in app.store.all()[1:]] == [
                "Book a meeting at 3pm",
                "Meeting booked",
            ]
            history = app.query_one("#chat-history", ChatHistoryWidget)
            assert history.rendered_count == 3
            assert history.get_last_response() == "Meeting booked"
            assert app.query_one("#chat-input", TextArea).text == ""

    async def test_send_button_disabled_for_blank_input(self, webhook_url):
        """Test that whitespace-only input cannot be sent."""
        client = StubWebhookClient()
        app = HookchatApp(client=client, endpoint_url=webhook_url)
        async with app.run_test(size=SIZE) as pilot:
            app.query_one("#chat-input", TextArea).text = "   "
            await pilot.pause()
            button = app.query_one("#send-btn", Button)
            assert button.disabled

            button.press()
            await pilot.pause()
            assert client.calls == []

    async def test_busy_state_during_request(self, webhook_url):
        """Test that the input is disabled and the indicator shown while waiting."""
        gate = asyncio.Event()
        client = StubWebhookClient(replies=["done"], gate=gate)
        app = HookchatApp(client=client, endpoint_url=webhook_url)
        async with app.run_test(size=SIZE) as pilot:
            app.query_one("#chat-input", TextArea).text = "hello"
            await pilot.pause()
            app.query_one("#send-btn", Button).press()
            await pilot.pause()

            assert app.store.state.is_sending
            assert app.query_one("#typing-indicator", TypingIndicator).display
            assert app.query_one("#chat-input", TextArea).disabled
            assert app.query_one("#send-btn", Button).disabled

            # A second submission while busy is ignored
            app.query_one("#chat-input-bar", ChatInputBar).post_message(
                ChatInputBar.Submitted("again")
            )
            await pilot.pause()

            gate.set()
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert len(client.calls) == 1
            assert not app.query_one("#typing-indicator", TypingIndicator).display
            assert not app.query_one("#chat-input", TextArea).disabled

    async def test_failure_shows_banner_and_notice(self, webhook_url):
        """Test that a failed send shows the banner and a system message."""
        client = StubWebhookClient(replies=[TransportError.from_status(500)])
        app = HookchatApp(client=client, endpoint_url=webhook_url)
        async with app.run_test(size=SIZE) as pilot:
            await _type_and_send(app, pilot, "hello")

            banner = app.query_one("#error-banner", ErrorBanner)
            assert banner.display
            assert app.store.state.error == "Failed to send message: HTTP error! status: 500"
            assert app.store.all()[-1].sender is Sender.SYSTEM
            assert app.store.all()[-1].text == FAILURE_NOTICE
            assert len(app.query(".system-message")) == 1

    async def test_dismissing_banner(self, webhook_url):
        """Test that Dismiss hides the banner and keeps the messages."""
        client = StubWebhookClient(replies=[TransportError("boom")])
        app = HookchatApp(client=client, endpoint_url=webhook_url)
        async with app.run_test(size=SIZE) as pilot:
            await _type_and_send(app, pilot, "hello")
            count = len(app.store.all())

            app.query_one("#dismiss-btn", Button).press()
            await pilot.pause()

            assert not app.query_one("#error-banner", ErrorBanner).display
            assert app.store.state.error is None
            assert len(app.store.all()) == count

    async def test_next_send_clears_banner(self, webhook_url):
        """Test that a retry hides the previous error."""
        client = StubWebhookClient(replies=[TransportError("boom"), "ok"])
        app = HookchatApp(client=client, endpoint_url=webhook_url)
        async with app.run_test(size=SIZE) as pilot:
            await _type_and_send(app, pilot, "hello")
            assert app.query_one("#error-banner", ErrorBanner).display

            await _type_and_send(app, pilot, "hello again")
            assert not app.query_one("#error-banner", ErrorBanner).display

    async def test_send_after_configuring(self, webhook_url):
        """Test that the URL entered in the panel is the one used."""
        client = StubWebhookClient()
        app = HookchatApp(client=client)
        async with app.run_test(size=SIZE) as pilot:
            app.query_one("#webhook-url", Input).value = webhook_url
            await pilot.pause()
            app.query_one("#save-btn", Button).press()
            await pilot.pause()

            await _type_and_send(app, pilot, "hello")

            assert client.calls[0][0] == webhook_url


    async def test_unexpected_error_keeps_app_running(self, webhook_url):
        """Test that a client bug is shown as a failed turn instead of exiting."""
        client = StubWebhookClient(replies=[RuntimeError("bug"), "ok"])
        app = HookchatApp(client=client, endpoint_url=webhook_url)
        async with app.run_test(size=SIZE) as pilot:
            await _type_and_send(app, pilot, "hello")

            assert app.is_running
            assert app.store.all()[-1].text == FAILURE_NOTICE
            assert app.store.state.error == "Failed to send message: bug"
            assert not app.store.state.is_sending
            assert app.query_one("#error-banner", ErrorBanner).display

            await _type_and_send(app, pilot, "hello again")
            assert app.store.all()[-1].text == "ok"


class TestLogPanel:
    """Tests for the log panel."""

    async def test_toggle_debug(self):
        """Test that the log panel toggles on and off."""
        app = HookchatApp(client=StubWebhookClient())
        async with app.run_test(size=SIZE) as pilot:
            log_panel = app.query_one("#debug-panel", DebugPanel)

            await app.run_action("toggle_debug")
            await pilot.pause()
            assert log_panel.display

            await app.run_action("toggle_debug")
            await pilot.pause()
            assert not log_panel.display

    async def test_client_messages_reach_log_panel(self, webhook_url):
        """Test that webhook debug output is written to the log panel."""
        app = HookchatApp(client=StubWebhookClient(), endpoint_url=webhook_url, log_level="debug")
        async with app.run_test(size=SIZE) as pilot:
            log_panel = app.query_one("#debug-panel", DebugPanel)
            before = len(log_panel.lines)

            await _type_and_send(app, pilot, "hello")

            assert len(log_panel.lines) > before

    async def test_level_filtering(self):
        """Test that entries below the threshold are dropped."""
        app = HookchatApp(client=StubWebhookClient(), log_level="error")
        async with app.run_test(size=SIZE) as pilot:
            log_panel = app.query_one("#debug-panel", DebugPanel)
            await pilot.pause()
            before = len(log_panel.lines)

            log_panel.info("Chat", "ignored")
            log_panel.error("Chat", "kept")
            await pilot.pause()

            assert len(log_panel.lines) == before + 1
