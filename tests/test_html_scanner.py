from cardroster.models.enums import TableShape
from cardroster.parsing.html_scanner import (
    detect_table_shape,
    scan_rows,
    strip_html,
)


def test_strip_html_removes_tags_and_decodes_entities():
    text = "  <b>Smith&nbsp;&amp;&nbsp;Jones</b> &quot;A&quot;&#8217; "
    assert strip_html(text) == 'Smith & Jones "A"'


def test_scan_rows_yields_cells_in_document_order():
    html = """
    <table>
      <TR class="odd"><TD>Open</TD><td align="left"><a href="#">Alpha</a></td></TR>
      <tr><td>Women</td>
          <td>Beta</td></tr>
    </table>
    """
    assert list(scan_rows(html)) == [["Open", "Alpha"], ["Women", "Beta"]]


def test_scan_rows_skips_unterminated_row():
    html = "<tr><td>Open</td><td>Alpha</td></tr><tr><td>Women</td><td>Beta</td>"
    assert list(scan_rows(html)) == [["Open", "Alpha"]]


def test_scan_rows_is_restartable():
    html = "<tr><td>a</td></tr><tr><td>b</td></tr>"
    assert list(scan_rows(html)) == list(scan_rows(html))


def test_detect_shape_from_id_header():
    html = (
        "<tr><th>Event</th><th> id </th><th>Team Name</th><th>Roster</th></tr>"
        "<tr><td>Open</td><td>A1</td><td>Alpha</td><td>x</td></tr>"
    )
    assert detect_table_shape(html) == TableShape.HAS_ID_COLUMN


def test_detect_shape_from_numeric_second_cell():
    html = "<tr><td>Open</td><td>42</td><td>Alpha</td><td>x</td></tr>"
    assert detect_table_shape(html) == TableShape.HAS_ID_COLUMN


def test_detect_shape_only_inspects_first_row_with_two_cells():
    html = (
        "<tr><td>Results</td></tr>"
        "<tr><td>Event</td><td>Team</td><td>Roster</td></tr>"
        "<tr><td>Open</td><td>42</td><td>Alpha</td><td>x</td></tr>"
    )
    assert detect_table_shape(html) == TableShape.NO_ID_COLUMN


def test_detect_shape_defaults_to_no_id_column():
    assert detect_table_shape("") == TableShape.NO_ID_COLUMN
    assert detect_table_shape("<p>not a table") == TableShape.NO_ID_COLUMN
    assert detect_table_shape("<td>IDEA</td><td>x</td>") == TableShape.NO_ID_COLUMN
