"""Tests for RSS feed rendering."""

import pytest

from podfeed.config.schema import ChannelConfig
from podfeed.feeds.models import EpisodeRecord
from podfeed.feeds.renderer import (
    INVALID_DATE,
    FeedRenderer,
    escape_xml,
    format_pub_date,
    render_feed,
)
from podfeed.utils.errors import EmptyFeedError

EXPECTED_DOCUMENT = """\
<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
  <channel>
    <title>T</title>
    <description>D</description>
    <link>https://x</link>
    <language>en-us</language>
    <copyright>C</copyright>
    <managingEditor></managingEditor>
    <webMaster></webMaster>
    <itunes:author>A</itunes:author>
    <itunes:explicit>no</itunes:explicit>
    <itunes:owner>
      <itunes:name>A</itunes:name>
      <itunes:email>a@x.com</itunes:email>
    </itunes:owner>
    <itunes:image href="https://x/img.jpg" />
    <itunes:category text="Education" />
    <item>
      <title>Ep 1</title>
      <description>Ep 1</description>
      <pubDate>Tue, 02 Jan 2024 10:00:00 GMT</pubDate>
      <guid>g1</guid>
      <enclosure url="https://a.com/ep1.mp3" type="audio/mpeg" />
      <link>https://a.com/ep1</link>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def record() -> EpisodeRecord:
    """A single episode record."""
    return EpisodeRecord(
        url="https://a.com/ep1",
        title="Ep 1",
        date="2024-01-02T10:00:00Z",
        guid="g1",
        enclosure_url="https://a.com/ep1.mp3",
    )


class TestEscapeXml:
    """Tests for escape_xml function."""

    def test_escapes_all_special_characters(self) -> None:
        """Test that each special character maps to its entity exactly once."""
        assert escape_xml("&<>\"'") == "&amp;&lt;&gt;&quot;&apos;"

    def test_entities_from_later_steps_not_reescaped(self) -> None:
        """Test that ampersands introduced by escaping are left alone."""
        escaped = escape_xml("a < b & c > 'd'")
        assert escaped == "a &lt; b &amp; c &gt; &apos;d&apos;"
        assert "&amp;lt;" not in escaped
        assert "&amp;apos;" not in escaped

    def test_plain_text_is_fixed_point(self) -> None:
        """Test that text without special characters is unchanged."""
        assert escape_xml("Plain title 123") == "Plain title 123"

    def test_none_is_empty(self) -> None:
        """Test that None renders as an empty string."""
        assert escape_xml(None) == ""


class TestFormatPubDate:
    """Tests for format_pub_date function."""

    def test_iso_utc(self) -> None:
        """Test RFC-1123 output for an ISO-8601 UTC timestamp."""
        assert format_pub_date("2024-01-02T10:00:00Z") == "Tue, 02 Jan 2024 10:00:00 GMT"

    def test_offset_converted_to_utc(self) -> None:
        """Test that timestamps with an offset are shifted to GMT."""
        assert (
            format_pub_date("2024-01-02T12:30:00+02:00") == "Tue, 02 Jan 2024 10:30:00 GMT"
        )

    def test_naive_read_as_utc(self) -> None:
        """Test that timestamps without a zone are treated as UTC."""
        assert format_pub_date("2024-01-02 10:00:00") == "Tue, 02 Jan 2024 10:00:00 GMT"

    def test_date_only_is_midnight(self) -> None:
        """Test that a bare date renders at midnight UTC."""
        assert format_pub_date("2024-01-02") == "Tue, 02 Jan 2024 00:00:00 GMT"

    @pytest.mark.parametrize("value", ["not a date", "", None])
    def test_unparseable_renders_invalid_date(self, value: str | None) -> None:
        """Test that unparseable dates produce the invalid-date sentinel."""
        assert format_pub_date(value) == INVALID_DATE == "Invalid Date"

    @pytest.mark.parametrize("value", ["Monday", "10:00", "5", "March"])
    def test_date_fragments_render_invalid_date(self, value: str) -> None:
        """Test that strings lacking a year, month or day are not completed."""
        assert format_pub_date(value) == INVALID_DATE

    def test_rfc_1123_input_round_trips(self) -> None:
        """Test that an already formatted pubDate is accepted."""
        value = "Tue, 02 Jan 2024 10:00:00 GMT"
        assert format_pub_date(value) == value


class TestRenderFeed:
    """Tests for render_feed function."""

    def test_full_document(self, record: EpisodeRecord, channel_config: ChannelConfig) -> None:
        """Test the exact document layout for a single episode."""
        assert render_feed([record], channel_config) == EXPECTED_DOCUMENT

    @pytest.mark.parametrize("records", [[], None, (), "not-a-list", 42, {"a": 1}])
    def test_empty_or_invalid_records_raise(
        self, records: object, channel_config: ChannelConfig
    ) -> None:
        """Test that empty or non-sequence input is rejected."""
        with pytest.raises(EmptyFeedError):
            render_feed(records, channel_config)  # type: ignore[arg-type]

    def test_title_escaped_in_title_and_description(
        self, record: EpisodeRecord, channel_config: ChannelConfig
    ) -> None:
        """Test that the escaped title is reused as the description."""
        document = render_feed([record.model_copy(update={"title": "R&B Show"})], channel_config)

        assert "<title>R&amp;B Show</title>" in document
        assert "<description>R&amp;B Show</description>" in document

    def test_guid_unescaped_by_default(
        self, record: EpisodeRecord, channel_config: ChannelConfig
    ) -> None:
        """Test that guids are written verbatim unless escaping is enabled."""
        tricky = record.model_copy(update={"guid": "a&b"})

        assert "<guid>a&b</guid>" in render_feed([tricky], channel_config)
        assert "<guid>a&amp;b</guid>" in render_feed(
            [tricky], channel_config, escape_guid=True
        )

    def test_channel_values_escaped(self, record: EpisodeRecord) -> None:
        """Test that channel text and attribute values are escaped."""
        channel = ChannelConfig(
            title="Tom & Jerry",
            category='Kids "&" Family',
            itunes_image="https://x/img.jpg?a=1&b=2",
        )

        document = render_feed([record], channel)

        assert "<title>Tom &amp; Jerry</title>" in document
        assert '<itunes:category text="Kids &quot;&amp;&quot; Family" />' in document
        assert '<itunes:image href="https://x/img.jpg?a=1&amp;b=2" />' in document

    def test_missing_channel_fields_render_empty(self, record: EpisodeRecord) -> None:
        """Test that unset channel fields produce empty elements, not omissions."""
        document = render_feed([record], ChannelConfig())

        assert "<title></title>" in document
        assert "<copyright></copyright>" in document
        assert "<itunes:email></itunes:email>" in document
        assert '<itunes:image href="" />' in document
        assert "<language>en-us</language>" in document
        assert "<itunes:explicit>no</itunes:explicit>" in document

    def test_items_in_record_order(
        self, record: EpisodeRecord, channel_config: ChannelConfig
    ) -> None:
        """Test that items appear in the order given."""
        records = [record.model_copy(update={"guid": f"g{n}"}) for n in range(3)]

        document = render_feed(records, channel_config)

        positions = [document.index(f"<guid>g{n}</guid>") for n in range(3)]
        assert positions == sorted(positions)
        assert document.count("<item>") == 3

    def test_item_element_order(
        self, record: EpisodeRecord, channel_config: ChannelConfig
    ) -> None:
        """Test the fixed element order inside an item."""
        document = render_feed([record], channel_config)
        item = document[document.index("<item>") :]

        tags = ["<title>", "<description>", "<pubDate>", "<guid>", "<enclosure", "<link>"]
        positions = [item.index(tag) for tag in tags]
        assert positions == sorted(positions)

    def test_invalid_date_rendered(
        self, record: EpisodeRecord, channel_config: ChannelConfig
    ) -> None:
        """Test that an unparseable date still renders the item."""
        document = render_feed([record.model_copy(update={"date": "soon"})], channel_config)
        assert "<pubDate>Invalid Date</pubDate>" in document

    def test_output_is_trimmed(
        self, record: EpisodeRecord, channel_config: ChannelConfig
    ) -> None:
        """Test that the document has no surrounding whitespace."""
        document = render_feed([record], channel_config)
        assert document == document.strip()
        assert document.startswith('<?xml version="1.0" encoding="UTF-8"?>')

    def test_renderer_is_deterministic(
        self, record: EpisodeRecord, channel_config: ChannelConfig
    ) -> None:
        """Test that repeated renders are byte-identical."""
        renderer = FeedRenderer(channel_config)
        assert renderer.render([record]) == renderer.render([record])
