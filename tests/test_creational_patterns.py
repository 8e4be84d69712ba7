"""
Tests for the creational pattern demonstrations.
"""

import threading

import pytest

from catalog.errors import InvalidInput, NotFound
from catalog.patterns.abstract_factory import (
    AbstractFactoryDemo,
    AndroidWidgetFactory,
    IOSWidgetFactory,
    factory_for,
    render_settings_screen,
)
from catalog.patterns.builder import AlertDialogBuilder, BuilderDemo, DialogDirector
from catalog.patterns.factory_method import (
    AndroidNotificationService,
    FactoryMethodDemo,
    FcmTransport,
    IOSNotificationService,
)
from catalog.patterns.prototype import PrototypeDemo, ScreenTemplate, default_prototypes
from catalog.patterns.singleton import AnalyticsTracker, ProcessScoped, SingletonDemo


class TestBuilder:
    def test_fluent_build(self):
        dialog = (
            AlertDialogBuilder()
            .title("Saved")
            .message("All good")
            .button("Done")
            .build()
        )

        assert dialog.title == "Saved"
        assert dialog.buttons == ("Done",)
        assert dialog.cancelable

    def test_default_button(self):
        assert AlertDialogBuilder().title("Hi").build().buttons == ("OK",)

    def test_title_required(self):
        with pytest.raises(InvalidInput):
            AlertDialogBuilder().message("no title").build()

    def test_modal_dialog_needs_button(self):
        with pytest.raises(InvalidInput):
            AlertDialogBuilder().title("Stuck").cancelable(False).build()

    def test_director_resets_builder(self):
        builder = AlertDialogBuilder()
        builder.title("Leftover").icon("info")
        dialog = DialogDirector(builder).rate_app()

        assert dialog.icon is None
        assert dialog.title == "Enjoying the app?"

    def test_unknown_recipe(self):
        with pytest.raises(NotFound):
            DialogDirector(AlertDialogBuilder()).make("welcome")

    def test_recipe_with_unexpected_argument(self):
        with pytest.raises(InvalidInput):
            DialogDirector(AlertDialogBuilder()).make("rate_app", item="x")

    def test_recipe_with_missing_argument(self):
        with pytest.raises(InvalidInput):
            DialogDirector(AlertDialogBuilder()).make("confirm_delete")

    def test_demo_effects(self):
        assert BuilderDemo().run() == [
            "dialog 'Offline' message='Changes will sync later.' buttons=[OK] cancelable",
            "dialog 'Delete?' icon=warning message='photo.jpg will be removed permanently.'"
            " buttons=[Cancel, Delete] modal",
            "dialog 'Enjoying the app?' buttons=[Rate now, Later] cancelable",
        ]

    def test_demo_without_title(self):
        with pytest.raises(InvalidInput):
            BuilderDemo().run({"title": ""})


class TestAbstractFactory:
    @pytest.mark.parametrize("factory", [IOSWidgetFactory(), AndroidWidgetFactory()])
    def test_widgets_come_from_one_family(self, factory):
        platforms = {factory.create_button().platform, factory.create_switch().platform}

        assert len(platforms) == 1

    def test_client_code_is_platform_agnostic(self, effects):
        render_settings_screen(factory_for("Android"), effects)

        assert effects.snapshot() == [
            "[android] notifications SwitchCompat(checked=true)",
            "[android] MaterialButton(SAVE)",
        ]

    def test_unknown_platform(self):
        with pytest.raises(NotFound):
            factory_for("symbian")

    def test_demo_effects(self):
        assert AbstractFactoryDemo().run() == [
            "[ios] notifications UISwitch(isOn=true)",
            "[ios] UIButton(Save)",
            "[android] notifications SwitchCompat(checked=true)",
            "[android] MaterialButton(SAVE)",
        ]


class TestPrototype:
    def test_clone_is_deep(self):
        original = ScreenTemplate("Home", sections=["feed"], options={"tabs": ["a"]})
        clone = original.clone()
        clone.sections.append("ads")
        clone.options["tabs"].append("b")

        assert original.sections == ["feed"]
        assert original.options == {"tabs": ["a"]}

    def test_clone_with_overrides(self):
        clone = ScreenTemplate("Home").clone(title="Away", theme="dark")

        assert (clone.title, clone.theme) == ("Away", "dark")

    def test_unknown_override(self):
        with pytest.raises(InvalidInput):
            ScreenTemplate("Home").clone(colour="red")

    def test_registry_clone_unknown(self):
        with pytest.raises(NotFound):
            default_prototypes().clone("checkout")

    def test_demo_effects(self):
        assert PrototypeDemo().run() == [
            "clone: Welcome back sections=['hero', 'features', 'cta', 'whats-new']",
            "original: Welcome sections=['hero', 'features', 'cta']",
            "shared sections: False",
        ]


class TestFactoryMethod:
    def test_subclass_picks_transport(self, effects):
        assert isinstance(AndroidNotificationService(effects).create_transport(), FcmTransport)

    def test_send_uses_created_transport(self, effects):
        IOSNotificationService(effects).send("tok", "Hi")

        assert effects.snapshot() == ["APNs aps.alert='Hi' -> tok"]

    def test_unknown_platform(self):
        with pytest.raises(NotFound):
            FactoryMethodDemo().run({"devices": [["web", "t"]]})


class TestSingleton:
    def test_sequential_access_returns_same_instance(self):
        assert AnalyticsTracker.get_instance() is AnalyticsTracker.get_instance()

    def test_concurrent_first_access_creates_one_instance(self):
        created = []

        def factory():
            created.append(object())
            return created[-1]

        holder = ProcessScoped(factory)
        barrier = threading.Barrier(8)
        seen = []

        def worker():
            barrier.wait()
            seen.append(holder.get())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(created) == 1
        assert all(instance is created[0] for instance in seen)

    def test_lazy_creation(self):
        holder = ProcessScoped(list)

        assert not holder.initialized
        holder.get()
        assert holder.initialized

    def test_demo_effects(self):
        assert SingletonDemo().run() == [
            "sequential calls same instance: True",
            "4 threads saw 1 instance(s)",
            "tracked 'app_open' on the shared tracker",
        ]
