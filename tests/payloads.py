"""Sample KOBIS searchDailyBoxOfficeList bodies."""

DAILY_URL = "http://kobis.test/rest/boxoffice/searchDailyBoxOfficeList.json"


def make_payload(entries):
    return {
        "boxOfficeResult": {
            "boxofficeType": "일별 박스오피스",
            "showRange": "20240315~20240315",
            "dailyBoxOfficeList": entries,
        }
    }


def make_entry(rank, title, audi_cnt, open_dt="2024-02-22"):
    return {
        "rnum": str(rank),
        "rank": str(rank),
        "rankInten": "0",
        "rankOldAndNew": "OLD",
        "movieCd": f"2024{rank:04d}",
        "movieNm": title,
        "openDt": open_dt,
        "salesAmt": "1000000",
        "audiCnt": audi_cnt,
        "audiAcc": "9999999",
    }
