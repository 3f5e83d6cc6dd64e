"""Tests for order_processor.urls"""
import pytest

from order_processor.urls import classify_order_number, generate_urls, order_url


class TestClassifyOrderNumber:
    @pytest.mark.parametrize('order_number, kind', [
        ('https://x', 'url'),
        ('1ccca6e6-7d39-4e03-889a-5b0aa24eee34', 'manapool'),
        ('1CCCA6E6-7D39-4E03-889A-5B0AA24EEE34', 'manapool'),
        ('8B5DCE37-050272-E8FFC', 'tcgplayer'),
        ('8b5dce37-050272-e8ffc', 'tcgplayer'),
        ('ZZZ123', 'unknown'),
        ('http://manapool.com/x', 'unknown'),
    ])
    def test_kinds(self, order_number, kind) -> None:
        assert classify_order_number(order_number) == kind

    def test_link_wins_over_identifier_shape(self) -> None:
        url = 'https://manapool.com/seller/orders/1ccca6e6-7d39-4e03-889a-5b0aa24eee34'
        assert order_url(url) == url


class TestOrderUrl:
    def test_manapool(self) -> None:
        assert order_url('1ccca6e6-7d39-4e03-889a-5b0aa24eee34') == (
            'https://manapool.com/seller/orders/1ccca6e6-7d39-4e03-889a-5b0aa24eee34'
        )

    def test_tcgplayer(self) -> None:
        assert order_url('8B5DCE37-050272-E8FFC') == 'https://sellerportal.tcgplayer.com/orders/8B5DCE37-050272-E8FFC'

    def test_unknown_falls_back_to_tcgplayer(self) -> None:
        assert order_url('ZZZ123') == 'https://sellerportal.tcgplayer.com/orders/ZZZ123'


class TestGenerateUrls:
    def test_blank_lines_dropped_and_order_kept(self) -> None:
        assert generate_urls(['b', '', '  ', 'a']) == [
            'https://sellerportal.tcgplayer.com/orders/b',
            'https://sellerportal.tcgplayer.com/orders/a',
        ]

    def test_no_lines(self) -> None:
        assert generate_urls([]) == []
