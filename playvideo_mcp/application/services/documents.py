"""Markdown bodies of the documentation resources.

``{api_url}`` is replaced with the configured API root when read; the texts
are otherwise static.
"""

QUICKSTART = """# PlayVideo Quick Start

## 1. Create a Collection

Collections organize your videos. Create one per project:

```bash
curl -X POST {api_url}/collections \\
  -H "Authorization: Bearer play_live_xxx" \\
  -H "Content-Type: application/json" \\
  -d '{"name": "My App Videos"}'
```

## 2. Upload a Video

```bash
curl -X POST {api_url}/videos \\
  -H "Authorization: Bearer play_live_xxx" \\
  -F "file=@video.mp4" \\
  -F "collection=my_app_videos"
```

## 3. Check Status & Get Stream URL

```bash
curl {api_url}/videos/VIDEO_ID \\
  -H "Authorization: Bearer play_live_xxx"
```

Once processing is complete the response includes `playlistUrl`, an HLS
stream playable by any HLS player.

## 4. Embed the Video

Use the embed API (`POST /embed/sign`) to get signed embed codes.
"""

API_REFERENCE = """# PlayVideo API Reference

Base URL: {api_url}

## Authentication

All requests require: `Authorization: Bearer play_live_xxx`

## Endpoints

### Collections
- `GET /collections` - List collections
- `POST /collections` - Create collection
- `GET /collections/:slug` - Get collection with videos
- `DELETE /collections/:slug` - Delete collection

### Videos
- `GET /videos` - List videos (`collection`, `status`, `limit` query parameters)
- `POST /videos` - Upload video (multipart/form-data)
- `GET /videos/:id` - Get video
- `DELETE /videos/:id` - Delete video
- `GET /videos/:id/embed` - Get embed info
- `GET /videos/:id/progress` - SSE stream for processing progress

### Webhooks (PRO/BUSINESS)
- `GET /webhooks` - List webhooks
- `POST /webhooks` - Create webhook
- `GET /webhooks/:id` - Get webhook with deliveries
- `PATCH /webhooks/:id` - Update webhook
- `POST /webhooks/:id/test` - Test webhook
- `DELETE /webhooks/:id` - Delete webhook

### Embed
- `GET /embed/settings` - Get embed settings
- `PATCH /embed/settings` - Update embed settings
- `POST /embed/sign` - Generate signed embed URL

### API Keys
- `GET /api-keys` - List API keys
- `POST /api-keys` - Create API key
- `DELETE /api-keys/:id` - Delete API key

### Account
- `GET /account` - Get account info
- `PATCH /account` - Update account

### Usage
- `GET /usage` - Get usage stats and limits

## Errors

Failed requests return a non-2xx status and a JSON body with a `message`
(or `error`) field describing the problem.
"""

SDKS = """# PlayVideo SDKs

Official SDKs are available for several languages. Point them at
{api_url} when using a self-hosted deployment.

## Python

```bash
pip install playvideo
```

```python
from playvideo import PlayVideo

client = PlayVideo("play_live_xxx")

# Upload a video
result = client.videos.upload("./video.mp4", "my-collection")

# Watch processing progress
for event in client.videos.watch_progress(result.video["id"]):
    print(event.stage, event.message)
    if event.stage == "completed":
        break
```

## JavaScript/TypeScript

```bash
npm install playvideo
```

```typescript
import PlayVideo from 'playvideo';

const client = new PlayVideo('play_live_xxx');

const result = await client.videos.uploadFile('./video.mp4', 'my-collection');

for await (const event of client.videos.watchProgress(result.video.id)) {
  console.log(event.stage, event.message);
  if (event.stage === 'completed') break;
}
```

## PHP

```bash
composer require playvideo/playvideo
```

```php
use PlayVideo\\PlayVideo;

$client = new PlayVideo('play_live_xxx');
$result = $client->videos->upload('./video.mp4', 'my-collection');
```

## Go

```bash
go get github.com/PlayVideo-dev/playvideo-go
```

```go
client := playvideo.NewClient("play_live_xxx")
result, _ := client.Videos.UploadFile(ctx, "./video.mp4", "my-collection", nil)
```

## GitHub Repositories

- Python: https://github.com/PlayVideo-dev/playvideo-python
- JavaScript: https://github.com/PlayVideo-dev/playvideo-js
- PHP: https://github.com/PlayVideo-dev/playvideo-php
- Go: https://github.com/PlayVideo-dev/playvideo-go
"""

WEBHOOKS = """# PlayVideo Webhooks

Webhooks deliver real-time notifications when events occur.

## Available Events

- `video.uploaded` - Video upload started
- `video.processing` - Video processing started
- `video.completed` - Video processing completed
- `video.failed` - Video processing failed
- `collection.created` - Collection created
- `collection.deleted` - Collection deleted

## Creating a Webhook

```bash
curl -X POST {api_url}/webhooks \\
  -H "Authorization: Bearer play_live_xxx" \\
  -H "Content-Type: application/json" \\
  -d '{
    "url": "https://your-server.com/webhook",
    "events": ["video.completed", "video.failed"]
  }'
```

**IMPORTANT**: Save the `secret` from the response - it is only shown once!

## Verifying Signatures

Every webhook request carries these headers:
- `X-PlayVideo-Signature`: HMAC-SHA256 signature (`sha256=...`)
- `X-PlayVideo-Timestamp`: Unix timestamp in milliseconds

### Python
```python
from playvideo.webhook import verify_signature

@app.route("/webhook", methods=["POST"])
def webhook():
    verify_signature(
        request.data,
        request.headers["X-PlayVideo-Signature"],
        request.headers["X-PlayVideo-Timestamp"],
        "whsec_xxx",
    )
```

### JavaScript
```javascript
import { verifyWebhookSignature } from 'playvideo/webhooks';

const isValid = await verifyWebhookSignature(
  req.body,
  req.headers['x-playvideo-signature'],
  req.headers['x-playvideo-timestamp'],
  'whsec_xxx'
);
```

## Webhook Payload

```json
{
  "event": "video.completed",
  "timestamp": 1705123456789,
  "data": {
    "id": "vid_xxx",
    "filename": "video.mp4",
    "status": "COMPLETED",
    "playlistUrl": "https://cdn.playvideo.dev/..."
  }
}
```
"""
