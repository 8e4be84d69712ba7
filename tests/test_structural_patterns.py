"""
Tests for the structural pattern demonstrations.
"""

import concurrent.futures

import pytest

from catalog.errors import NotFound, Unauthorized
from catalog.patterns.adapter import (
    AdapterDemo,
    JsonPaymentProcessor,
    LegacyXmlGateway,
    PaymentRequest,
    XmlPaymentAdapter,
)
from catalog.patterns.bridge import AlertNotification, PushChannel, SmsChannel
from catalog.patterns.composite import Button, Label, ViewGroup, build_profile_screen
from catalog.patterns.decorator import DecoratorDemo, build_sender
from catalog.patterns.facade import MediaPlaybackFacade
from catalog.patterns.proxy import (
    AuthorizingImageProxy,
    CachingImageProxy,
    LazyImageProxy,
    ProxyDemo,
    RemoteImageSource,
)


class TestAdapter:
    def test_adapter_delegates_once_per_call(self, effects):
        gateway = LegacyXmlGateway(effects)
        adapter = XmlPaymentAdapter(gateway)

        result = adapter.execute(PaymentRequest("o-1", 10.0))

        assert effects.snapshot() == ["payment processed via XML"]
        assert result.approved
        assert result.order_id == "o-1"
        assert result.channel == "xml"

    def test_adapter_preserves_semantics(self, effects):
        request = PaymentRequest("o-2", 0.0)
        legacy = XmlPaymentAdapter(LegacyXmlGateway(effects)).execute(request)
        modern = JsonPaymentProcessor(effects).execute(request)

        assert legacy.approved == modern.approved is False

    @pytest.mark.parametrize(
        "request_",
        [
            PaymentRequest("o-3", 0.004),
            PaymentRequest("A&B <rush>", 5.0),
            PaymentRequest("o-4", -0.001),
        ],
    )
    def test_both_processors_agree(self, effects, request_):
        legacy = XmlPaymentAdapter(LegacyXmlGateway(effects)).execute(request_)
        modern = JsonPaymentProcessor(effects).execute(request_)

        assert legacy.approved == modern.approved
        assert legacy.order_id == modern.order_id == request_.order_id

    def test_demo_with_xml_special_characters(self):
        assert AdapterDemo().run({"order_id": "A&B"})[1] == "A&B approved (xml)"

    def test_demo_effects(self):
        assert AdapterDemo().run() == [
            "payment processed via XML",
            "order-1001 approved (xml)",
            "payment processed via JSON",
            "order-1001 approved (json)",
        ]


class TestBridge:
    def test_same_abstraction_over_different_channels(self, effects):
        AlertNotification(PushChannel(effects)).send("me", "low storage")
        AlertNotification(SmsChannel(effects)).send("me", "low storage")

        assert effects.snapshot() == [
            "push to me: [ALERT] LOW STORAGE",
            "sms to me: [ALERT] LOW STORAGE",
        ]


class TestComposite:
    def test_render_order_and_depth(self, effects):
        tree = ViewGroup("root", [Label("t", "hi"), ViewGroup("row", [Button("ok")])])

        tree.render(effects)

        assert effects.snapshot() == [
            "group root",
            "  label t: hi",
            "  group row",
            "    button ok",
        ]

    def test_count_includes_groups(self):
        assert build_profile_screen("ada").count() == 8


class TestProxy:
    def test_second_fetch_served_from_cache(self, effects):
        source = RemoteImageSource(effects)
        proxy = CachingImageProxy(source, effects)

        first = proxy.fetch("avatar.png")
        second = proxy.fetch("avatar.png")

        assert first == second
        assert effects.snapshot() == ["loaded-from-source", "loaded-from-cache"]
        assert source.loads == 1

    def test_invalidate_forces_reload(self, effects):
        source = RemoteImageSource(effects)
        proxy = CachingImageProxy(source, effects)
        proxy.fetch("a")
        proxy.invalidate("a")
        proxy.fetch("a")

        assert source.loads == 2

    def test_concurrent_fetches_load_once(self, effects):
        source = RemoteImageSource(effects)
        proxy = CachingImageProxy(source, effects)

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(proxy.fetch, ["same.png"] * 20))

        assert len(set(results)) == 1
        assert source.loads == 1

    def test_protection_proxy_rejects_missing_token(self, effects):
        proxy = AuthorizingImageProxy(RemoteImageSource(effects), None, {"t"})

        with pytest.raises(Unauthorized):
            proxy.fetch("secret.png")
        assert effects.snapshot() == []

    def test_lazy_proxy_completes_once(self, effects):
        lazy = LazyImageProxy("hero.png", RemoteImageSource(effects), effects)

        assert lazy.image is None
        assert lazy.display().succeeded
        assert lazy.display().succeeded

        assert effects.snapshot() == ["loaded-from-source", "lazy image ready: hero.png"]

    def test_lazy_proxy_cancelled_before_load(self, effects):
        lazy = LazyImageProxy("hero.png", RemoteImageSource(effects), effects)
        lazy.load().cancel()

        assert lazy.display().cancelled
        assert effects.snapshot() == ["cancelled"]
        assert lazy.image is None

    def test_demo_unauthorized_is_recorded(self):
        with pytest.raises(Unauthorized) as exc_info:
            ProxyDemo().run({"token": "stolen"})
        assert exc_info.value.effects == ["error: Unauthorized"]

    def test_demo_default_effects(self):
        assert ProxyDemo().run() == [
            "loaded-from-source",
            "loaded-from-cache",
            "loaded-from-source",
            "loaded-from-source",
            "lazy image ready: hero.png",
        ]


class TestFacade:
    def test_subsystems_driven_in_order(self, effects):
        MediaPlaybackFacade(effects).play("v1")

        assert effects.snapshot() == [
            "network: open stream v1",
            "decoder: configure h264",
            "buffer: prefill 5s from stream://v1",
            "renderer: attach main-surface",
            "renderer: start",
        ]


class TestDecorator:
    def test_outermost_layer_runs_first(self, effects):
        build_sender(["log", "compress", "encrypt"], effects).send(b"payload")
        kinds = [effect.split()[0] for effect in effects]

        assert kinds == ["log", "compress", "encrypt", "send", "log"]

    def test_undecorated_sender(self, effects):
        assert build_sender([], effects).send(b"abc") == 3
        assert effects.snapshot() == ["send 3 bytes"]

    def test_unknown_layer(self):
        with pytest.raises(NotFound):
            DecoratorDemo().run({"layers": ["gzip"]})
