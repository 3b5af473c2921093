import json, requests, os, statistics
from rapidfuzz import fuzz


BASE_URL = os.getenv('BASE_URL', 'http://localhost:8000')


with open(os.path.join(os.path.dirname(__file__), 'questions.json'), 'r', encoding='utf-8') as f:
    items = json.load(f)


scores = []
results = []
for item in items:
    msg = item['message']
    r = requests.post(f"{BASE_URL}/chat", json={'message': msg})
    data = r.json()
    answer = data.get('response', '')
    expected_keywords = item.get('expected_keywords', [])
    keyword_hits = sum(1 for k in expected_keywords if k.lower() in answer.lower())
    fuzzy = fuzz.partial_ratio(' '.join(expected_keywords), answer)
    # tier term: a right answer reached through the wrong tier (e.g. partial instead of comparison) is a routing regression
    tier_ok = 1.0 if item.get('expected_tier') in (None, data.get('tier')) else 0.0
    composite = (keyword_hits / max(1, len(expected_keywords))) * 0.4 + (fuzzy / 100) * 0.4 + tier_ok * 0.2
    scores.append(composite)
    results.append({"message": msg, "tier": data.get('tier'), "answer": answer, "score": composite})


summary = {
  'avg_score': statistics.mean(scores) if scores else 0.0,
  'details': results
}
print(json.dumps(summary, indent=2, ensure_ascii=False))
