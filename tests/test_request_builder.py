"""Tests for request URL composition."""

import pytest

from core.config import DEFAULT_API_ENDPOINT
from core.domain.bounded import BoundedValue, Count
from core.domain.seed import SeedEncoder
from core.domain.size_limit import SizeLimit
from core.errors import CountOutOfRangeError
from core.services.request_builder import HexbotRequest, as_count, build_url

ENDPOINT = DEFAULT_API_ENDPOINT


class TestBuildUrl:
    """Tests for build_url."""

    def test_all_absent(self):
        """Should be the bare endpoint with a trailing '?'."""
        url = build_url(ENDPOINT, Count.absent(), SizeLimit.absent(), SeedEncoder.absent())
        assert url == f'{ENDPOINT}?'

    def test_count_only(self):
        url = build_url(ENDPOINT, Count.of(100), SizeLimit.absent(), SeedEncoder.absent())
        assert url == f'{ENDPOINT}?&count=100'

    def test_size_only(self):
        url = build_url(ENDPOINT, Count.absent(), SizeLimit.create(40, 60), SeedEncoder.absent())
        assert url == f'{ENDPOINT}?&width=40&height=60'

    def test_seed_only(self):
        seed = SeedEncoder.create([0xB7410E, 0xB22222])
        url = build_url(ENDPOINT, Count.absent(), SizeLimit.absent(), seed)
        assert url == f'{ENDPOINT}?&seed=B7410E,B22222'

    def test_fixed_parameter_order(self):
        """count, then width/height, then seed."""
        url = build_url(
            ENDPOINT,
            Count.of(70),
            SizeLimit.create(400, 400),
            SeedEncoder.create([0xFFFFFF]),
        )
        assert url == f'{ENDPOINT}?&count=70&width=400&height=400&seed=FFFFFF'

    def test_boundary_constructors(self):
        url = build_url(ENDPOINT, Count.max(), SizeLimit.min(), SeedEncoder.absent())
        assert url == f'{ENDPOINT}?&count=1000&width=10&height=10'

    def test_endpoint_with_question_mark(self):
        url = build_url(f'{ENDPOINT}?', Count.of(3), SizeLimit.absent(), SeedEncoder.absent())
        assert url == f'{ENDPOINT}?&count=3'

    def test_generic_bounded_value_as_count(self):
        count = BoundedValue.create(5, 1, 1000, parameter='count')
        url = build_url(ENDPOINT, count, SizeLimit.absent(), SeedEncoder.absent())
        assert url == f'{ENDPOINT}?&count=5'

    def test_count_with_wider_bounds_is_checked(self):
        """A count built with other bounds is still limited to [1, 1000]."""
        count = BoundedValue.create(5000, 1, 10_000, parameter='count')
        with pytest.raises(CountOutOfRangeError):
            build_url(ENDPOINT, count, SizeLimit.absent(), SeedEncoder.absent())

    def test_as_count(self):
        assert as_count(BoundedValue.create(7, 1, 10_000)) == Count.of(7)
        assert not as_count(BoundedValue.absent(1, 10_000)).present


class TestHexbotRequest:
    """Tests for the request bundle."""

    def test_defaults_are_absent(self):
        request = HexbotRequest()
        assert not request.count.present
        assert not request.size.present
        assert not request.seed.present
        assert request.url(ENDPOINT) == f'{ENDPOINT}?'

    def test_url(self):
        request = HexbotRequest(count=Count.of(5), seed=SeedEncoder.create([0x00AA00]))
        assert request.url('https://hexbot.test/hexbot') == 'https://hexbot.test/hexbot?&count=5&seed=00AA00'

    def test_defaults_are_not_shared(self):
        first = HexbotRequest()
        first.seed.append(0x123456)
        assert not HexbotRequest().seed.present

    def test_rejects_count_outside_api_range(self):
        with pytest.raises(CountOutOfRangeError):
            HexbotRequest(count=BoundedValue.create(5000, 1, 10_000))
