"""Tests for producer wrappers and detection."""

from boxdi import Box, Constant, Factory, constant, factory
from boxdi.producers import describe, is_initializer


class TestFactory:
    """Tests for factory()."""

    def test_builds_value(self, box):
        """Test that the wrapped function produces the instance."""
        Config = factory(lambda box: {"value": "from factory"})

        assert box.get(Config) == {"value": "from factory"}

    def test_caches_instance(self, box):
        """Test that a factory's result is cached."""
        Config = factory(lambda box: {"value": object()})

        assert box.get(Config) is box.get(Config)

    def test_receives_box(self, box):
        """Test that the function can resolve dependencies."""
        class Dependency:
            value = "dependency"

        Holder = factory(lambda box: {"dep": box.get(Dependency)})

        assert box.get(Holder)["dep"] is box.get(Dependency)

    def test_interface_and_implementation(self, box):
        """Test binding an abstract role to a concrete class."""
        class ListLogger:
            def __init__(self):
                self.messages = []

            def log(self, message):
                self.messages.append(message)

        Logger = factory(lambda box: ListLogger())

        logger = box.get(Logger)
        logger.log("test")

        assert box.get(Logger).messages == ["test"]

    def test_name_and_repr(self):
        """Test the factory's display name."""
        def build_client(box):
            return None

        producer = factory(build_client)

        assert isinstance(producer, Factory)
        assert producer.name.endswith("build_client")
        assert repr(producer).startswith("<Factory ")


class TestConstant:
    """Tests for constant()."""

    def test_returns_same_object(self, box):
        """Test that the wrapped value is returned as-is."""
        config = {"api_url": "https://api.example.com", "timeout": 3000}
        Config = constant(config)

        assert box.get(Config) is config
        assert box.get(Config) is config

    def test_primitive_values(self, box):
        """Test constants for str, int and bool."""
        ApiUrl = constant("https://api.example.com")
        Port = constant(3000)
        IsEnabled = constant(True)

        assert box.get(ApiUrl) == "https://api.example.com"
        assert box.get(Port) == 3000
        assert box.get(IsEnabled) is True

    def test_port_resolves_on_every_call(self, box):
        """Test that a constant resolves to its value repeatedly."""
        Port = constant(3000)

        assert [box.get(Port) for _ in range(3)] == [3000, 3000, 3000]
        assert box.new(Port) == 3000

    def test_distinct_constants_do_not_collide(self, box):
        """Test that equal values wrapped twice are separate producers."""
        first = constant([1])
        second = constant([1])
        other = constant(4000)

        assert box.get(first) is first.value
        assert box.get(second) is second.value
        assert box.get(first) is not box.get(second)
        assert box.get(other) == 4000
        assert len(box) == 3

    def test_new_ignores_box(self):
        """Test that the init function does not use the box argument."""
        value = object()

        assert constant(value).init(None) is value

    def test_dependency_of_initializer(self, box):
        """Test using a constant inside another producer's init."""
        Config = constant({"api_url": "https://api.example.com"})

        class ApiClient:
            def __init__(self, config):
                self.config = config

            @staticmethod
            def init(box):
                return ApiClient(box.get(Config))

        assert box.get(ApiClient).config["api_url"] == "https://api.example.com"

    def test_repr(self):
        """Test constant display."""
        producer = constant(3000)

        assert isinstance(producer, Constant)
        assert isinstance(producer, Factory)
        assert repr(producer) == "<Constant 3000>"


class TestIsInitializer:
    """Tests for producer variant detection."""

    def test_plain_class(self):
        class Plain:
            pass

        assert not is_initializer(Plain)

    def test_static_and_class_methods(self):
        class WithStatic:
            @staticmethod
            def init(box):
                return WithStatic()

        class WithClassmethod:
            @classmethod
            def init(cls, box):
                return cls()

        assert is_initializer(WithStatic)
        assert is_initializer(WithClassmethod)

    def test_instance_method_does_not_count(self):
        class WithMethod:
            def init(self, box):
                pass

        assert not is_initializer(WithMethod)

    def test_subclass_override_wins(self):
        """Test that the nearest definition in the MRO decides."""
        class Base:
            @staticmethod
            def init(box):
                return Base()

        class Child(Base):
            def init(self, box):
                pass

        assert is_initializer(Base)
        assert not is_initializer(Child)

    def test_objects(self):
        assert is_initializer(factory(lambda box: 1))
        assert is_initializer(constant(1))
        assert not is_initializer(object())

    def test_describe(self):
        class Service:
            pass

        assert describe(Service).endswith("Service")
        assert describe(constant(1)) == "<Constant 1>"
        assert describe(Box) == "Box"
