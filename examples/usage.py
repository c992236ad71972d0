import os

import spotplayer
from spotplayer import LicenseClient, SpotPlayerError

API_KEY = os.environ.get("SPOTPLAYER_API_KEY", "")
COURSE = os.environ.get("SPOTPLAYER_COURSE", "5d2ee35bcddc092a304ae5eb")

def simple_license(name, phone, test=False):
    return {
        "test": test,
        "course": [COURSE],
        "name": name,
        "watermark": {"texts": [{"text": phone}]},
    }

def full_license(name, phone, courses, order_id):
    stroke = {"color": 2164260863, "size": 1}
    return {
        "test": False,
        "course": courses,
        "offline": 30,
        "name": name,
        "payload": order_id,
        "data": {"confs": 0, "limit": {c: "0-" for c in courses}},
        "watermark": {
            "position": 511,
            "reposition": 15,
            "margin": 40,
            "texts": [
                {"text": phone, "repeat": 10, "font": 1, "weight": 1, "color": 2164260863, "size": 50, "stroke": stroke},
                {"text": phone, "repeat": 1, "font": 1, "weight": 1, "color": 2164260863, "size": 200, "stroke": stroke},
            ],
        },
        "device": {"p0": 1, "p1": 1, "p2": 0, "p3": 0, "p4": 0, "p5": 0, "p6": 0},
    }

def _show(label, result):
    print(label, result.get("_id"), result.get("key"), result.get("url"))

def with_instance():
    with LicenseClient(API_KEY) as client:
        _show("created:", client.create_license(simple_license("customer", "09022223301")))
        result = client.create_license(full_license("premium-customer", "09022223301", [COURSE], "order-12345"))
        _show("created:", result)
        edited = client.edit_license(result["_id"], {"name": "updated-customer", "device": {"p1": 1}})
        print("edited:", edited)

def with_module_helpers():
    spotplayer.set_api_key(API_KEY)
    _show("created:", spotplayer.create_license(simple_license("test-customer", "09022223301", test=True)))
    print("edited:", spotplayer.edit_license("5dcab540796f5d4d48a6570f", {"device": {"p1": 1, "p2": 1}}))

if __name__ == "__main__":
    try:
        with_instance()
        with_module_helpers()
    except SpotPlayerError as e:
        print("error:", e.code, e.message)
