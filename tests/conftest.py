from textwrap import dedent

import pytest


@pytest.fixture
def go_module(tmp_path):
	"""A Go module `example.com/shop` with one package and a test file."""
	root = tmp_path / "shop"
	pkg = root / "orders"
	pkg.mkdir(parents=True)
	(root / "go.mod").write_text("module example.com/shop\n\ngo 1.21\n")
	(pkg / "order.go").write_text(
		dedent(
			"""
			package orders

			type Order struct {
				ID    int
				Items []*Item
			}
			"""
		)
	)
	(pkg / "item.go").write_text(
		dedent(
			"""
			package orders

			type Item struct {
				Name  string
				Price float64
			}
			"""
		)
	)
	(pkg / "order_test.go").write_text(
		dedent(
			"""
			package orders

			type fixture struct {
				Order
			}
			"""
		)
	)
	return root
