"""Addresses and values shared by the pricing tests."""

from decimal import Decimal

WMETIS = "0x75cb093e4d61d2a2e65d8e0bbb01de8d89b53481"
WETH = "0x420000000000000000000000000000000000000a"
USDC = "0xea32a96608495e54156ae48931a7c20f0dcc1a21"
USDT = "0xbb06dca3ae6887fabf931640f67cab3e3a16f4dc"
RANDOM_TOKEN = "0x1111111111111111111111111111111111111111"

USDC_WMETIS_POOL = "0xa4e4949e0cccd8282f30e7e113d8a551a1ed1aeb"
WETH_WMETIS_POOL = "0xbd718c67cd1e2f7fbe22d47be21036cd647c7714"

TEST_NATIVE_PRICE_USD = Decimal("40")
