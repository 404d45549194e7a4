"""
Tests for flattening structured records (dataclasses, pydantic models, NamedTuples, plain objects).
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, NamedTuple, Optional

import pytest
from pydantic import BaseModel

from flattree import FlattenerConfig, KeyCollisionError, flatten_record


@dataclass
class TypeStr:
    Name: str


@dataclass
class Account:
    Name: str
    ID: int
    Type: TypeStr
    Active: bool


@dataclass
class PasswordHash:
    algorithm: str = ""
    salt: str = ""
    work_factor: Optional[int] = None


@dataclass
class Password:
    hash: Optional[PasswordHash] = None
    value: str = ""


@dataclass
class Provider:
    name: str = ""
    type: str = ""


@dataclass
class Credentials:
    password: Optional[Password] = None
    provider: Optional[Provider] = None


@dataclass
class Item:
    id: int
    label: str = ""


@dataclass
class Order:
    tags: List[str] = field(default_factory=list)
    items: List[Optional[Item]] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Flags:
    enabled: bool = False
    count: int = 0


@dataclass
class Settings:
    flags: Flags
    blank: Provider


class Address(BaseModel):
    city: str
    zip_code: Optional[str] = None


class User(BaseModel):
    id: str
    status: str = "ACTIVE"
    address: Optional[Address] = None
    groups: List[str] = []


class Invoice(BaseModel):
    number: str
    discount: Decimal = Decimal("0")


class Point(NamedTuple):
    x: int
    y: int


class Legacy:
    def __init__(self):
        self.host = "localhost"
        self.port = 5432
        self._secret = "hidden"


class TestKeySynthesis:
    """Tests for how record keys are built"""

    def test_prefix_and_separator(self):
        """The prefix is glued to top-level names; nesting adds one separator"""
        account = Account(Name="test", ID=54, Type=TypeStr(Name="testflat"), Active=True)
        result = flatten_record(account, prefix="a-", separator="~")
        assert result == {
            "a-Name": "test",
            "a-ID": 54,
            "a-Type~Name": "testflat",
            "a-Active": True,
        }

    def test_default_config(self):
        """Default keys have no prefix and '.' between levels"""
        account = Account(Name="n", ID=1, Type=TypeStr(Name="t"), Active=False)
        assert flatten_record(account) == {"Name": "n", "ID": 1, "Type.Name": "t", "Active": False}

    def test_field_order(self):
        """Keys follow declaration order"""
        account = Account(Name="n", ID=1, Type=TypeStr(Name="t"), Active=True)
        assert list(flatten_record(account)) == ["Name", "ID", "Type.Name", "Active"]

    def test_scalar_sequence_single_separator(self):
        """Scalar sequence items are keyed field.index"""
        result = flatten_record(Order(tags=["x", "y"]))
        assert result == {"tags.0": "x", "tags.1": "y"}

    def test_record_sequence(self):
        """Record items nest below their index"""
        result = flatten_record(Order(items=[Item(id=1, label="a"), Item(id=2)]))
        assert result == {
            "items.0.id": 1,
            "items.0.label": "a",
            "items.1.id": 2,
            "items.1.label": "",
        }

    def test_untyped_mapping(self):
        """Dict fields flatten like JSON objects, at any depth"""
        order = Order(extra={"city": "Rome", "geo": {"lat": 1.5, "tags": ["a"]}, "item": Item(id=7)})
        result = flatten_record(order)
        assert result == {
            "extra.city": "Rome",
            "extra.geo.lat": 1.5,
            "extra.geo.tags.0": "a",
            "extra.item.id": 7,
            "extra.item.label": "",
        }

    def test_sort_and_lower(self):
        """Post-processing applies to records too"""
        account = Account(Name="n", ID=1, Type=TypeStr(Name="t"), Active=True)
        result = flatten_record(account, sort_keys=True, keys_to_lower=True)
        assert list(result) == ["active", "id", "name", "type.name"]


class TestOmitSwitches:
    """Tests for omit_nil and omit_empty on records"""

    def test_unset_optional_kept_without_omit_nil(self):
        """An unset optional is a None leaf by default"""
        result = flatten_record(Credentials(provider=Provider(name="IAM", type="IAM")))
        assert result == {"password": None, "provider.name": "IAM", "provider.type": "IAM"}

    def test_omit_nil_drops_unset_record(self):
        """No key derived from an unset optional record survives omit_nil"""
        result = flatten_record(Credentials(provider=Provider(name="IAM")), omit_nil=True)
        assert result == {"provider.name": "IAM", "provider.type": ""}
        assert not any(key.startswith("password") for key in result)

    def test_omit_nil_nested(self):
        """omit_nil applies at every level"""
        creds = Credentials(password=Password(hash=PasswordHash(algorithm="BCRYPT")))
        result = flatten_record(creds, omit_nil=True)
        assert result == {
            "password.hash.algorithm": "BCRYPT",
            "password.hash.salt": "",
            "password.value": "",
        }

    def test_omit_nil_keeps_zero_values(self):
        """Zero values are not nil"""
        result = flatten_record(Flags(), omit_nil=True)
        assert result == {"enabled": False, "count": 0}

    def test_omit_empty_drops_zero_scalars(self):
        """omit_empty drops "", 0 and None but keeps False"""
        result = flatten_record(PasswordHash(algorithm="BCRYPT"), omit_empty=True)
        assert result == {"algorithm": "BCRYPT"}
        assert flatten_record(Flags(), omit_empty=True) == {"enabled": False}

    def test_omit_empty_drops_empty_record(self):
        """A nested record whose fields are all zero is dropped whole"""
        settings = Settings(flags=Flags(), blank=Provider())
        assert flatten_record(settings, omit_empty=True) == {"flags.enabled": False}

    def test_omit_empty_sequence_items(self):
        """Filtering applies to scalar sequence items"""
        assert flatten_record(Order(tags=["a", "", "b"]), omit_empty=True) == {"tags.0": "a", "tags.2": "b"}

    def test_optional_items_in_sequence(self):
        """Unset items in a sequence of optionals follow omit_nil"""
        order = Order(items=[Item(id=1, label="x"), None])
        assert flatten_record(order) == {"items.0.id": 1, "items.0.label": "x", "items.1": None}
        assert flatten_record(order, omit_nil=True) == {"items.0.id": 1, "items.0.label": "x"}


class TestRecordKinds:
    """Tests for the supported record types"""

    def test_pydantic_model(self):
        """Pydantic models flatten through their declared fields"""
        user = User(id="u1", address=Address(city="Rome"), groups=["admin"])
        result = flatten_record(user)
        assert result == {
            "id": "u1",
            "status": "ACTIVE",
            "address.city": "Rome",
            "address.zip_code": None,
            "groups.0": "admin",
        }

    def test_pydantic_omit_nil(self):
        """Unset optional pydantic fields disappear with omit_nil"""
        result = flatten_record(User(id="u1"), omit_nil=True)
        assert result == {"id": "u1", "status": "ACTIVE"}

    def test_named_tuple(self):
        """NamedTuples are records, not sequences"""
        assert flatten_record({"p": Point(1, 2)}) == {"p.x": 1, "p.y": 2}

    def test_plain_object(self):
        """Plain objects use their public attributes"""
        assert flatten_record(Legacy(), prefix="db_") == {"db_host": "localhost", "db_port": 5432}

    def test_dict_root(self):
        """A dict root is walked like a mapping field"""
        assert flatten_record({"a": {"b": Item(id=3)}}) == {"a.b.id": 3, "a.b.label": ""}

    def test_shared_config(self):
        """One config object serves many calls"""
        config = FlattenerConfig(separator="/", omit_empty=True)
        first = flatten_record(Item(id=1), config)
        second = flatten_record(Item(id=2, label="b"), config)
        assert first == {"id": 1}
        assert second == {"id": 2, "label": "b"}

    def test_collision_error(self):
        """Record keys can collide too"""
        with pytest.raises(KeyCollisionError):
            flatten_record({"a.b": 1, "a": {"b": 2}}, collision_policy="error")

    def test_decimal_zero_is_empty(self):
        """A zero Decimal field is dropped by omit_empty like any other zero number"""
        assert flatten_record(Invoice(number="A-1"), omit_empty=True) == {"number": "A-1"}
        result = flatten_record(Invoice(number="A-2", discount=Decimal("2.50")), omit_empty=True)
        assert result == {"number": "A-2", "discount": Decimal("2.50")}
