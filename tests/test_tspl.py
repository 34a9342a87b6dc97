import pytest

from conftest import make_label
from markit_print_service.exceptions import InvalidRequest
from markit_print_service.handlers import TSPLHandler
from markit_print_service.models import LabelItem


@pytest.fixture
def handler():
    return TSPLHandler()


def test_label_block_layout(handler):
    block = handler.build_label(LabelItem.from_dict(make_label()))
    lines = block.decode('utf-8').split('\r\n')

    assert lines == [
        'SIZE 50 mm,38 mm',
        'GAP 3 mm,0.7 mm',
        'DIRECTION 0',
        'CLS',
        'TEXT 10,18,"3",0,1,1,"Markit Store"',
        'BAR 0,48,400,2',
        'TEXT 10,58,"2",0,1,1,"Cotton T-Shirt"',
        'TEXT 10,83,"2",0,1,1,"Blue - M"',
        'TEXT 10,110,"2",0,1,1,"MRP Rs.499.00"',
        'TEXT 10,168,"1",0,1,1,"TS01-Acme"',
        'BARCODE 10,185,"128",100,0,0,3,3,"8901234567890"',
        'TEXT 10,292,"1",0,1,1,"8901234567890"',
        'PRINT 1,1',
        '',
    ]


def test_discount_price_adds_strike_bar(handler):
    commands = handler.label_commands(LabelItem.from_dict(make_label(dprice='399.5')))

    mrp = commands.index('TEXT 10,110,"2",0,1,1,"MRP Rs.499.00"')
    assert commands[mrp + 1] == 'BAR 10,116,220,4'
    assert commands[mrp + 2] == 'TEXT 10,136,"2",0,1,1,"Discount Rs.399.50"'


def test_variant_without_size(handler):
    commands = handler.label_commands(LabelItem.from_dict(make_label(size='')))
    assert 'TEXT 10,83,"2",0,1,1,"Blue"' in commands


def test_quotes_are_escaped(handler):
    commands = handler.label_commands(LabelItem.from_dict(make_label(productName='12" Ruler')))
    assert 'TEXT 10,58,"2",0,1,1,"12\\["] Ruler"' in commands


def test_json_numbers_and_booleans_render_like_the_frontend(handler):
    item = LabelItem.from_dict(make_label(barcode=8901234567890.0, size=12.0,
                                          code=7, brand=True))
    commands = handler.label_commands(item)

    assert 'TEXT 10,83,"2",0,1,1,"Blue - 12"' in commands
    assert 'TEXT 10,168,"1",0,1,1,"7-true"' in commands
    assert 'BARCODE 10,185,"128",100,0,0,3,3,"8901234567890"' in commands
    assert 'TEXT 10,292,"1",0,1,1,"8901234567890"' in commands


def test_items_missing_fields_are_skipped(handler):
    items = [
        make_label(barcode='111'),
        make_label(barcode=''),
        make_label(barcode='333'),
    ]
    batch = handler.build(handler.parse(items))

    assert len(batch.blocks) == 2
    assert batch.skipped == 1
    assert b'"111"' in batch.blocks[0]
    assert b'"333"' in batch.blocks[1]


@pytest.mark.parametrize('field', ['barcode', 'productName', 'name', 'sprice', 'shopname'])
def test_each_required_field(handler, field):
    item = make_label()
    del item[field]
    assert handler.build([item]).skipped == 1


def test_non_numeric_price_is_skipped(handler):
    batch = handler.build([make_label(sprice='free')])
    assert batch.blocks == []
    assert batch.skipped == 1


def test_non_object_items_are_skipped(handler):
    batch = handler.build(['label', make_label()])
    assert len(batch.blocks) == 1
    assert batch.skipped == 1


@pytest.mark.parametrize('payload', [None, [], {}, 'labels'])
def test_payload_must_be_non_empty_list(handler, payload):
    with pytest.raises(InvalidRequest):
        handler.parse(payload)
