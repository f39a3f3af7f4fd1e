"""Sample cases loaded into the fallback store."""

from case_library.domain.entities import VideoCase

DEMO_CASES: list[VideoCase] = [
    VideoCase(
        id="1",
        category="Catering",
        subcategory="Fast Food",
        region="USA",
        robot_type="BellaBot",
        client_name="McDonald's",
        video_url="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        rating=4,
        keywords=["delivery", "fastfood"],
    ),
    VideoCase(
        id="2",
        category="Catering",
        subcategory="Hotpot",
        region="China",
        robot_type="KettyBot",
        client_name="Haidilao",
        video_url="https://youtu.be/9bZkp7q19f0",
        rating=5,
        keywords=["hotpot", "reception", "delivery"],
    ),
    VideoCase(
        id="3",
        category="Retail",
        subcategory="Supermarket",
        region="Japan",
        robot_type="KettyBot",
        client_name="Aeon Mall",
        video_url="https://drive.google.com/file/d/retail-demo/view",
        rating=4,
        keywords=["advertising", "guidance"],
    ),
    VideoCase(
        id="4",
        category="Cleaning",
        region="Germany",
        robot_type="CC1",
        client_name="Frankfurt Airport",
        video_url="https://www.facebook.com/watch/?v=1234567890",
        rating=3,
        keywords=["floor", "scrubbing"],
        description="Overnight terminal floor care.",
    ),
]
