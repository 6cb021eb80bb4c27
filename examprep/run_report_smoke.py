import argparse
import json
import time
import requests

BASE_URL = "http://127.0.0.1:8000"
HISTORY_ENDPOINT = "/history"
REPORT_ENDPOINT = "/report-card"
IN_FILE = "examprep/sample_exams.json"
OUT_FILE = "examprep/report_results.json"


def main():
    parser = argparse.ArgumentParser(description="Post sample exams to a running server and save its report card.")
    parser.add_argument("--base_url", default=BASE_URL)
    parser.add_argument("--exams", default=IN_FILE, help="JSON list of {subjectId, answers}")
    parser.add_argument("--out", default=OUT_FILE)
    args = parser.parse_args()

    with open(args.exams, "r", encoding="utf-8") as f:
        exams = json.load(f)

    for i, exam in enumerate(exams, start=1):
        print(f"[{i}/{len(exams)}] {exam.get('subjectId')} ({len(exam.get('answers', []))} answers)")
        r = requests.post(args.base_url + HISTORY_ENDPOINT, json=exam, timeout=30)
        if r.status_code == 404:
            print(f"  skipped: unknown subject {exam.get('subjectId')}")
            continue
        r.raise_for_status()
        time.sleep(0.1)  # small delay

    r = requests.get(args.base_url + REPORT_ENDPOINT, timeout=30)
    r.raise_for_status()
    report = r.json()

    for row in report.get("subjects", []):
        print(
            f"{row['code']:<8} {row['questions_answered_unique']:>4}/{row['total_questions_in_bank']:<4} "
            f"attempts={row['total_attempts']:<4} coverage={row['coverage_display']}%"
        )

    with open(args.out, "w", encoding="utf-8") as f:
        json.dump(report, f, ensure_ascii=False, indent=2)

    print(f"\nSaved report to {args.out}")

if __name__ == "__main__":
    main()
